"""Configuration management for the newsletter signup service."""
import os


class Config:
    """Base configuration."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'
    DEBUG = os.environ.get('FLASK_DEBUG', 'False').lower() == 'true'
    TESTING = False

    # AWS settings
    SIGNUPS_TABLE = os.environ.get('SIGNUPS_TABLE', 'NewsletterSignups')

    # Logging
    LOG_DIR = os.environ.get('LOG_DIR', 'logs')

    # Optional gateway override, see blueprints.signup.routes.get_gateway
    SIGNUP_GATEWAY = None


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SIGNUPS_TABLE = 'NewsletterSignupsTest'


# Config dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
