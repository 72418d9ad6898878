"""
Shared pytest fixtures for the recipe catalog test suite.

Each test gets its own Flask app bound to a fresh in-memory SQLite
database with foreign keys enforced and the schema migrated.
"""
import io
import json
import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app, init_db  # noqa: E402
from config import TestingConfig  # noqa: E402
from logging_config import setup_logging  # noqa: E402
from models import db  # noqa: E402


class LogCapture:
    """Reads back the JSON lines written by the test logger."""

    def __init__(self, stream):
        self.stream = stream

    @property
    def records(self):
        return [json.loads(line) for line in self.stream.getvalue().splitlines() if line]

    def messages(self, level=None):
        return [r['msg'] for r in self.records if level is None or r['level'] == level]


@pytest.fixture
def log_capture():
    return LogCapture(io.StringIO())


@pytest.fixture
def logger(log_capture):
    return setup_logging('INFO', 'json', stream=log_capture.stream)


@pytest.fixture
def settings():
    return TestingConfig.from_env()


@pytest.fixture
def bare_app(settings, logger):
    """App with an empty database (schema not migrated)."""
    app = create_app(settings, logger)
    with app.app_context():
        yield app
        db.session.remove()


@pytest.fixture
def app(settings, logger):
    app = create_app(settings, logger)
    init_db(app, logger)
    with app.app_context():
        yield app
        db.session.remove()


@pytest.fixture
def session(app):
    return db.session
