"""
Application Configuration

Centralizes Flask and quantity conversion settings.
"""

import os

import constants


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # Quantity conversion settings
    FRACTION_TOLERANCE = float(os.environ.get('FRACTION_TOLERANCE', constants.FRACTION_TOLERANCE))
    FRACTION_MAX_ITERATIONS = int(os.environ.get('FRACTION_MAX_ITERATIONS', constants.MAX_EXPANSION_STEPS))
    QUANTITY_MAX_LENGTH = constants.MAX_LENGTHS['quantity_text']

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


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
    FRACTION_TOLERANCE = constants.FRACTION_TOLERANCE
    FRACTION_MAX_ITERATIONS = constants.MAX_EXPANSION_STEPS


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
