import time
from flask import current_app, g, request


def register_request_logging(app):
    """Log one line per API request and flag the slow ones."""

    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def log_request(response):
        started = g.pop('request_started', None)
        if started is None or not request.path.startswith('/api'):
            return response

        duration_ms = int((time.perf_counter() - started) * 1000)
        line = f"{request.method} {request.path} {response.status_code} in {duration_ms}ms"
        if duration_ms > current_app.config['SLOW_REQUEST_MS']:
            current_app.logger.warning(f"SLOW REQUEST: {line}")
        else:
            current_app.logger.info(line)
        return response
