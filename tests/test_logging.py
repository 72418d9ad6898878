"""Tests for logger setup and SQL query logging."""
import io
import json
import logging

from sqlalchemy import create_engine, text

from logging_config import LOGGER_NAME, install_query_logging, setup_logging


def test_json_lines_carry_extra_fields():
    stream = io.StringIO()
    logger = setup_logging('INFO', 'json', stream=stream)

    logger.info("Recipe created successfully", extra={'recipe_id': 7})

    entry = json.loads(stream.getvalue().splitlines()[-1])
    assert entry['level'] == 'info'
    assert entry['logger'] == LOGGER_NAME
    assert entry['msg'] == 'Recipe created successfully'
    assert entry['recipe_id'] == 7
    assert entry['ts'].endswith('Z')


def test_exception_is_serialized():
    stream = io.StringIO()
    logger = setup_logging('INFO', 'json', stream=stream)

    try:
        raise RuntimeError('boom')
    except RuntimeError:
        logger.exception("Failed")

    entry = json.loads(stream.getvalue().splitlines()[-1])
    assert 'RuntimeError: boom' in entry['error']


def test_console_format():
    stream = io.StringIO()
    logger = setup_logging('DEBUG', 'console', stream=stream)

    logger.debug("Schema updated", extra={'table': 'users'})

    line = stream.getvalue()
    assert '[D] recipe_catalog: Schema updated' in line
    assert 'table=users' in line


def test_root_logger_is_left_alone():
    root_handlers = list(logging.getLogger().handlers)
    logger = setup_logging('INFO', 'json', stream=io.StringIO())

    assert logging.getLogger().handlers == root_handlers
    assert logger.propagate is False
    assert len(logger.handlers) == 1


def test_repeated_setup_does_not_duplicate_handlers():
    setup_logging('INFO', 'json', stream=io.StringIO())
    logger = setup_logging('INFO', 'json', stream=io.StringIO())
    assert len(logger.handlers) == 1


def test_slow_queries_are_warnings():
    stream = io.StringIO()
    logger = setup_logging('DEBUG', 'json', stream=stream)
    engine = create_engine('sqlite://')
    install_query_logging(engine, logger, slow_threshold=1e-9)

    with engine.connect() as conn:
        conn.execute(text('SELECT 1'))

    entries = [json.loads(line) for line in stream.getvalue().splitlines()]
    slow = [e for e in entries if e['msg'] == 'Slow SQL query']
    assert slow and slow[0]['level'] == 'warning'
    assert slow[0]['sql'] == 'SELECT 1'
    assert slow[0]['logger'] == f'{LOGGER_NAME}.sql'


def test_fast_queries_are_debug():
    stream = io.StringIO()
    logger = setup_logging('DEBUG', 'json', stream=stream)
    engine = create_engine('sqlite://')
    install_query_logging(engine, logger, slow_threshold=60)

    with engine.connect() as conn:
        conn.execute(text('SELECT 1'))

    entries = [json.loads(line) for line in stream.getvalue().splitlines()]
    assert any(e['msg'] == 'SQL query' and e['level'] == 'debug' for e in entries)
