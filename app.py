"""
Recipe catalog entry point.

Loads configuration, connects to the database, migrates the schema,
seeds the example recipe and prints it back.
"""
import os
import sys

from flask import Flask
from flask_migrate import Migrate
from sqlalchemy.exc import SQLAlchemyError

from config import BASE_DIR, get_config, load_env
from logging_config import setup_logging, install_query_logging
from models import db
from services import migrate_schema, seed_example_recipe, first_recipe, format_recipe
from utils.errors import CatalogError, DatabaseUnavailable

migrate = Migrate(directory=os.path.join(BASE_DIR, 'migrations'))


def check_connection(logger):
    """Run a liveness query against the bound database."""
    try:
        with db.engine.connect() as conn:
            conn.execute(db.text('SELECT 1'))
    except SQLAlchemyError as e:
        logger.error("Database liveness check failed", extra={'error': str(e)})
        raise DatabaseUnavailable(f"Database liveness check failed: {e}") from e
    logger.info("Database connection established",
                extra={'dialect': db.engine.dialect.name})


def create_app(settings=None, logger=None):
    """
    Build the Flask app and bind the database.

    Called without arguments (as `flask --app app db upgrade` does) the
    settings and logger are built from the environment.

    Args:
        settings: dict of configuration values (see Config.from_env)
        logger: Application logger

    Raises:
        DatabaseUnavailable: If the engine cannot be created or reached
    """
    if settings is None:
        load_env(logger)
        settings = get_config().from_env()
    if logger is None:
        logger = setup_logging(settings['LOG_LEVEL'], settings['LOG_FORMAT'])

    app = Flask(__name__)
    app.config.update(settings)

    try:
        db.init_app(app)
    except (SQLAlchemyError, ImportError, RuntimeError) as e:
        logger.error("Failed to initialize database", extra={'error': str(e)})
        raise DatabaseUnavailable(f"Failed to initialize database: {e}") from e
    migrate.init_app(app, db)

    with app.app_context():
        install_query_logging(db.engine, logger, app.config.get('SLOW_QUERY_SECONDS'))
        check_connection(logger)

    return app


def init_db(app, logger):
    with app.app_context():
        return migrate_schema(db, logger)


def run(settings, logger):
    """
    Migrate, seed and read back. Returns the process exit code.
    """
    try:
        app = create_app(settings, logger)
        init_db(app, logger)
        logger.info("Database migration completed successfully")

        with app.app_context():
            if settings.get('SEED_EXAMPLE_DATA', True):
                seed_example_recipe(db.session, logger)

            recipe = first_recipe(db.session)
            if recipe is None:
                logger.info("No recipes stored")
            else:
                print(format_recipe(recipe))
    except CatalogError as e:
        logger.critical(str(e))
        return 1
    return 0


def main():
    bootstrap = setup_logging()
    load_env(bootstrap)

    try:
        settings = get_config().from_env()
    except ValueError as e:
        bootstrap.critical("Failed to load config", extra={'error': str(e)})
        return 1

    logger = setup_logging(settings['LOG_LEVEL'], settings['LOG_FORMAT'])
    return run(settings, logger)


if __name__ == '__main__':
    sys.exit(main())
