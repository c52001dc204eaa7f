from functools import wraps
from flask import request, current_app, make_response


def audit_log(action, resource):
    """Writes one audit line per write request, successful or not."""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            ip_address = request.remote_addr
            resource_id = next(iter(kwargs.values()), None)

            try:
                # Use make_response to handle both Response objects and tuples.
                response = make_response(f(*args, **kwargs))
            except Exception as e:
                current_app.audit_logger.error(
                    f"Action='{action}', Resource='{resource}', ResourceID='{resource_id}', "
                    f"IP='{ip_address}', Success='False', Details='An error occurred: {e}'"
                )
                raise

            success = response.status_code < 400
            if resource_id is None and success and response.is_json:
                body = response.get_json(silent=True)
                if isinstance(body, dict):
                    resource_id = body.get('id')

            current_app.audit_logger.info(
                f"Action='{action}', Resource='{resource}', ResourceID='{resource_id}', "
                f"IP='{ip_address}', Success='{success}', Status='{response.status_code}'"
            )
            return response

        return decorated_function
    return decorator
