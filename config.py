"""
Application Configuration

Centralizes all Flask and application configuration settings.
"""

import os

from constants import DEFAULT_SEARCH_THRESHOLD, DEFAULT_SUGGESTION_LIMIT, MAX_SERVINGS

# Base directory of the application
BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///recipes.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Search and scaling settings
    SEARCH_THRESHOLD = int(os.environ.get('SEARCH_THRESHOLD', DEFAULT_SEARCH_THRESHOLD))
    SUGGESTION_LIMIT = DEFAULT_SUGGESTION_LIMIT
    MAX_SERVINGS = MAX_SERVINGS

    # Request body limit
    MAX_CONTENT_LENGTH = 1 * 1024 * 1024  # 1MB max JSON body


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
