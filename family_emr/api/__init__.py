from flask import Blueprint

api_bp = Blueprint('api', __name__)
files_bp = Blueprint('files', __name__)

from family_emr.api import routes  # noqa: E402,F401
