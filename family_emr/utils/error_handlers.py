# /family_emr/utils/error_handlers.py
from flask import jsonify, current_app
from family_emr.extensions import db

RATE_LIMIT_RETRY_AFTER = 60


def register_error_handlers(app):
    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'message': 'Resource not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'message': 'Method not allowed'}), 405

    @app.errorhandler(413)
    def payload_too_large(error):
        max_size = current_app.config['MAX_UPLOAD_SIZE'] // (1024 * 1024)
        return jsonify({'message': f'File size exceeds {max_size}MB limit'}), 413

    @app.errorhandler(429)
    def too_many_requests(error):
        current_app.logger.warning(f"Rate limit exceeded: {error.description}")
        return jsonify({
            'message': 'Too many requests. Please try again later.',
            'retryAfter': RATE_LIMIT_RETRY_AFTER
        }), 429

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        current_app.logger.error(f"Internal server error: {str(error)}")
        return jsonify({'message': 'Internal server error'}), 500
