# /config.py
import os
import secrets
import logging
from logging.handlers import RotatingFileHandler

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Base configuration for the family health record service."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or secrets.token_hex(32)

    # Server
    PORT = int(os.environ.get('PORT', 5000))

    # Record store: 'memory' keeps everything in process, 'database' uses SQLAlchemy
    STORAGE_BACKEND = os.environ.get('STORAGE_BACKEND', 'database')
    SEED_DEMO_DATA = _env_flag('SEED_DEMO_DATA')

    # Database
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///' + os.path.join(BASE_DIR, 'family_emr.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
    }

    # Uploads
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER') or os.path.join(BASE_DIR, 'uploads')
    MAX_UPLOAD_SIZE = 10 * 1024 * 1024  # 10 MiB
    # Leaves room for the multipart envelope; the handler enforces MAX_UPLOAD_SIZE itself
    MAX_CONTENT_LENGTH = MAX_UPLOAD_SIZE + 1024 * 1024
    ALLOWED_UPLOAD_EXTENSIONS = {'jpg', 'jpeg', 'png', 'gif', 'webp', 'pdf', 'doc', 'docx', 'txt'}
    ALLOWED_UPLOAD_MIMETYPES = {
        'image/jpeg', 'image/jpg', 'image/png', 'image/gif', 'image/webp',
        'application/pdf', 'text/plain', 'application/msword',
        'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
    }

    # Rate Limiting
    RATELIMIT_ENABLED = True
    RATELIMIT_DEFAULT = os.environ.get('RATELIMIT_DEFAULT', '30 per minute;500 per day')
    RATELIMIT_STRATEGY = 'fixed-window'
    RATELIMIT_STORAGE_URI = os.environ.get('REDIS_URL') or 'memory://'
    RATELIMIT_HEADERS_ENABLED = True
    UPLOAD_RATE_LIMIT = '10 per minute'

    # CORS
    ALLOWED_ORIGINS = os.environ.get('ALLOWED_ORIGINS', 'http://localhost:5173,http://localhost:3000').split(',')

    # Logging
    LOG_DIR = os.environ.get('LOG_DIR') or os.path.join(BASE_DIR, 'logs')
    SLOW_REQUEST_MS = 1000

    @staticmethod
    def init_app(app):
        """Initialize application-specific configuration"""
        if not app.debug and not app.testing:
            os.makedirs(app.config['LOG_DIR'], exist_ok=True)
            file_handler = RotatingFileHandler(
                os.path.join(app.config['LOG_DIR'], 'app.log'), maxBytes=10240000, backupCount=10
            )
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
            ))
            file_handler.setLevel(logging.INFO)
            app.logger.addHandler(file_handler)
            app.logger.setLevel(logging.INFO)
            app.logger.info('Family EMR application startup')

        # Audit trail of every write made through the API
        audit_logger = logging.getLogger('AUDIT')
        if not audit_logger.handlers:
            if app.testing:
                audit_handler = logging.NullHandler()
            else:
                os.makedirs(app.config['LOG_DIR'], exist_ok=True)
                audit_handler = RotatingFileHandler(
                    os.path.join(app.config['LOG_DIR'], 'audit.log'), maxBytes=10240000, backupCount=20
                )
                audit_handler.setFormatter(logging.Formatter('%(asctime)s - %(message)s'))
            audit_logger.addHandler(audit_handler)
            audit_logger.setLevel(logging.INFO)
            audit_logger.propagate = False

        app.audit_logger = audit_logger


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    SEED_DEMO_DATA = _env_flag('SEED_DEMO_DATA', default=True)

    @staticmethod
    def init_app(app):
        Config.init_app(app)

        if not app.logger.handlers:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(logging.Formatter(
                '%(asctime)s %(levelname)s: %(message)s'
            ))
            app.logger.addHandler(console_handler)
        app.logger.setLevel(logging.DEBUG)


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    STORAGE_BACKEND = 'memory'
    SEED_DEMO_DATA = False
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    RATELIMIT_ENABLED = False

    @staticmethod
    def init_app(app):
        Config.init_app(app)


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False

    @classmethod
    def init_app(cls, app):
        Config.init_app(app)

        if not os.environ.get('SECRET_KEY'):
            app.logger.warning('SECRET_KEY not set in production, using a random key')

        if app.config['STORAGE_BACKEND'] == 'memory':
            app.logger.warning('Production is running on the in-memory store; data is lost on restart')


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
