"""
Application Configuration

Centralizes environment loading and database settings for the catalog.
"""

import os

from dotenv import find_dotenv, load_dotenv
from sqlalchemy.engine import URL

# Base directory of the application
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Connection defaults used when the environment leaves a value unset
DB_DEFAULTS = {
    'DB_HOST': 'localhost',
    'DB_USER': 'yourusername',
    'DB_PASSWORD': 'yourpassword',
    'DB_NAME': 'yourdbname',
    'DB_PORT': '5432',
    'DB_TIMEZONE': 'UTC',
    'DB_SSLMODE': 'disable',
}


def load_env(logger=None, path=None):
    """
    Load variables from a .env file into the process environment.

    A missing file is reported through the logger and is not an error.
    Variables already set in the environment win over the file.

    Returns:
        The path that was loaded, or None when no file was found
    """
    path = path or find_dotenv(usecwd=True)
    if not path or not os.path.isfile(path):
        if logger is not None:
            logger.info("No .env file found, using process environment")
        return None

    load_dotenv(path, override=False)
    if logger is not None:
        logger.info("Loaded environment file", extra={'path': path})
    return path


def get_env(key, default=None):
    """Return an environment variable, falling back to DB_DEFAULTS then default."""
    if key in os.environ:
        return os.environ[key]
    return DB_DEFAULTS.get(key, default)


def get_bool(key, default=False):
    value = os.environ.get(key)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def build_database_uri(env=None):
    """
    Assemble the PostgreSQL connection URL from DB_* variables.

    DATABASE_URL, when set, is used verbatim instead.

    Args:
        env: Mapping to read from (default: os.environ with DB_DEFAULTS)

    Returns:
        Connection string suitable for SQLALCHEMY_DATABASE_URI
    """
    if env is None:
        lookup = get_env
    else:
        def lookup(key, default=None):
            return env.get(key, DB_DEFAULTS.get(key, default))

    override = lookup('DATABASE_URL')
    if override:
        return override

    port = lookup('DB_PORT')
    try:
        port = int(port)
    except (TypeError, ValueError):
        raise ValueError(f"DB_PORT must be an integer, got {port!r}")

    url = URL.create(
        'postgresql+psycopg2',
        username=lookup('DB_USER'),
        password=lookup('DB_PASSWORD'),
        host=lookup('DB_HOST'),
        port=port,
        database=lookup('DB_NAME'),
        query={
            'sslmode': lookup('DB_SSLMODE'),
            'options': f"-c timezone={lookup('DB_TIMEZONE')}",
        },
    )
    return url.render_as_string(hide_password=False)


class Config:
    """Base configuration class."""

    APP_ENV = 'development'

    # Logging settings
    LOG_LEVEL = 'INFO'
    LOG_FORMAT = 'json'

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = None
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = False
    SQLALCHEMY_ENGINE_OPTIONS = {'pool_pre_ping': True}

    # Statements slower than this are logged as warnings
    SLOW_QUERY_SECONDS = 1.0

    # Run the example seed after migrating
    SEED_EXAMPLE_DATA = True

    @classmethod
    def from_env(cls):
        """Return a dict of settings with environment overrides applied."""
        settings = {
            key: getattr(cls, key) for key in dir(cls)
            if key.isupper()
        }
        settings['SQLALCHEMY_DATABASE_URI'] = (
            cls.SQLALCHEMY_DATABASE_URI or build_database_uri()
        )
        settings['LOG_LEVEL'] = os.environ.get('LOG_LEVEL', cls.LOG_LEVEL).upper()
        settings['LOG_FORMAT'] = os.environ.get('LOG_FORMAT', cls.LOG_FORMAT).lower()
        settings['SQLALCHEMY_ECHO'] = get_bool('SQL_ECHO', cls.SQLALCHEMY_ECHO)
        settings['SEED_EXAMPLE_DATA'] = get_bool('SEED_EXAMPLE_DATA', cls.SEED_EXAMPLE_DATA)
        try:
            settings['SLOW_QUERY_SECONDS'] = float(
                os.environ.get('SLOW_QUERY_SECONDS', cls.SLOW_QUERY_SECONDS)
            )
        except ValueError:
            settings['SLOW_QUERY_SECONDS'] = cls.SLOW_QUERY_SECONDS
        return settings


class DevelopmentConfig(Config):
    """Development configuration."""
    LOG_FORMAT = 'console'


class ProductionConfig(Config):
    """Production configuration."""
    APP_ENV = 'production'


class TestingConfig(Config):
    """Testing configuration."""
    APP_ENV = 'testing'
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    SEED_EXAMPLE_DATA = False


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('APP_ENV', 'default')
    return config.get(env, config['default'])
