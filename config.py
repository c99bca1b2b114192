"""
Application Configuration

Flask settings, store backend selection and the identity header.
"""

import os

# Base directory of the application
BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        'DATABASE_URL', 'sqlite:///' + os.path.join(BASE_DIR, 'pantry.db'))
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Where plans and pantry items live: 'sql' (local database) or 'rest' (hosted PostgREST)
    STORE_BACKEND = os.environ.get('STORE_BACKEND', 'sql')
    SUPABASE_URL = os.environ.get('SUPABASE_URL', '')
    SUPABASE_KEY = os.environ.get('SUPABASE_KEY', '')
    STORE_TIMEOUT = float(os.environ.get('STORE_TIMEOUT', '10'))

    # Header carrying the authenticated user id, set by the upstream auth layer
    USER_ID_HEADER = os.environ.get('USER_ID_HEADER', 'X-User-Id')

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Max JSON body size
    MAX_CONTENT_LENGTH = 1 * 1024 * 1024


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    STORE_BACKEND = 'sql'
    LOG_LEVEL = 'WARNING'


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
