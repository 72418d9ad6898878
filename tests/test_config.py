"""Tests for environment loading and connection string assembly."""
import os

import pytest
from sqlalchemy.engine import make_url

from config import (
    Config, DevelopmentConfig, ProductionConfig, TestingConfig,
    build_database_uri, get_config, load_env,
)


def test_database_uri_defaults():
    url = make_url(build_database_uri({}))

    assert url.drivername == 'postgresql+psycopg2'
    assert url.username == 'yourusername'
    assert url.password == 'yourpassword'
    assert url.host == 'localhost'
    assert url.port == 5432
    assert url.database == 'yourdbname'
    assert url.query['sslmode'] == 'disable'
    assert url.query['options'] == '-c timezone=UTC'


def test_database_uri_from_env_values():
    url = make_url(build_database_uri({
        'DB_HOST': 'db.internal',
        'DB_USER': 'chef',
        'DB_PASSWORD': 'p@ss:word',
        'DB_NAME': 'recipes',
        'DB_PORT': '6543',
        'DB_TIMEZONE': 'Europe/Paris',
    }))

    assert url.host == 'db.internal'
    assert url.username == 'chef'
    assert url.password == 'p@ss:word'
    assert url.database == 'recipes'
    assert url.port == 6543
    assert url.query['options'] == '-c timezone=Europe/Paris'


def test_database_url_override():
    assert build_database_uri({'DATABASE_URL': 'sqlite:///catalog.db'}) == 'sqlite:///catalog.db'


def test_bad_port_is_rejected():
    with pytest.raises(ValueError):
        build_database_uri({'DB_PORT': 'five'})


def test_process_environment_is_read(monkeypatch):
    monkeypatch.delenv('DATABASE_URL', raising=False)
    monkeypatch.setenv('DB_HOST', 'envhost')
    assert make_url(build_database_uri()).host == 'envhost'


def test_get_config():
    assert get_config('testing') is TestingConfig
    assert get_config('development') is DevelopmentConfig
    assert get_config('nonsense') is ProductionConfig


def test_get_config_from_app_env(monkeypatch):
    monkeypatch.setenv('APP_ENV', 'testing')
    assert get_config() is TestingConfig


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'debug')
    monkeypatch.setenv('SQL_ECHO', 'true')
    monkeypatch.setenv('SLOW_QUERY_SECONDS', 'not-a-number')

    settings = TestingConfig.from_env()

    assert settings['LOG_LEVEL'] == 'DEBUG'
    assert settings['SQLALCHEMY_ECHO'] is True
    assert settings['SLOW_QUERY_SECONDS'] == Config.SLOW_QUERY_SECONDS
    assert settings['SQLALCHEMY_DATABASE_URI'] == 'sqlite:///:memory:'
    assert settings['TESTING'] is True


def test_missing_env_file_is_not_fatal(tmp_path, logger, log_capture):
    assert load_env(logger, path=str(tmp_path / '.env')) is None
    assert 'No .env file found, using process environment' in log_capture.messages('info')


def test_env_file_is_loaded(tmp_path, monkeypatch, logger):
    env_file = tmp_path / '.env'
    env_file.write_text('DB_NAME=from_file\nDB_HOST=file-host\n')
    monkeypatch.delenv('DB_NAME', raising=False)
    monkeypatch.setenv('DB_HOST', 'already-set')

    assert load_env(logger, path=str(env_file)) == str(env_file)

    try:
        assert os.environ['DB_NAME'] == 'from_file'
        assert os.environ['DB_HOST'] == 'already-set'
    finally:
        os.environ.pop('DB_NAME', None)
