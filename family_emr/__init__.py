import os
from flask import Flask, jsonify
from family_emr.extensions import db, migrate, limiter, cors
from family_emr.storage import init_storage
from family_emr.utils.error_handlers import register_error_handlers
from family_emr.utils.request_logging import register_request_logging
from family_emr.utils.upload_util import upload_manager
from family_emr.commands import register_commands
from config import config


def create_app(config_name=None, overrides=None):
    app = Flask(__name__)

    config_name = config_name or os.environ.get('FLASK_ENV', 'default')
    config_class = config.get(config_name, config['default'])
    app.config.from_object(config_class)
    if overrides:
        app.config.update(overrides)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    limiter.init_app(app)
    cors.init_app(app, origins=app.config['ALLOWED_ORIGINS'])

    # Initialize app with config
    config_class.init_app(app)

    # Initialize custom utilities
    upload_manager.init_app(app)
    init_storage(app)

    # Register blueprints
    from family_emr.api import api_bp, files_bp
    app.register_blueprint(api_bp, url_prefix='/api')
    app.register_blueprint(files_bp)

    @app.route('/health')
    def health_check():
        return jsonify({'status': 'ok', 'storage': app.config['STORAGE_BACKEND']}), 200

    # Register error handlers, logging hooks and commands
    register_error_handlers(app)
    register_request_logging(app)
    register_commands(app)

    return app
