"""
Schema Migration

Brings the database up to the schema declared in models/. Changes are
additive only: missing tables, columns, indexes and constraints are
created; nothing is dropped or altered. Safe to run repeatedly.
"""

from dataclasses import dataclass, field

from sqlalchemy import CheckConstraint, ForeignKeyConstraint, UniqueConstraint, inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.schema import AddConstraint, CreateIndex

from utils.errors import MigrationError


@dataclass
class MigrationReport:
    """What a migrate_schema() run changed."""
    created_tables: list = field(default_factory=list)
    added_columns: list = field(default_factory=list)
    added_indexes: list = field(default_factory=list)
    added_constraints: list = field(default_factory=list)
    # Constraints the dialect cannot add to an existing table (SQLite)
    skipped_constraints: list = field(default_factory=list)

    @property
    def changed(self):
        return bool(
            self.created_tables or self.added_columns
            or self.added_indexes or self.added_constraints
        )


def _column_ddl(column, dialect):
    """Render the ADD COLUMN clause for a column on an existing table."""
    ddl = f"{dialect.identifier_preparer.quote(column.name)} {column.type.compile(dialect=dialect)}"
    if column.server_default is not None:
        default = column.server_default.arg
        if hasattr(default, 'text'):
            default = default.text
        ddl += f" DEFAULT {default}"
        if not column.nullable:
            ddl += " NOT NULL"
    # NOT NULL without a server default cannot be added to populated tables
    return ddl


def _constraint_name(constraint, prefix):
    if isinstance(constraint.name, str) and constraint.name:
        return str(constraint.name)
    columns = '_'.join(c.name for c in constraint.columns)
    return f"{prefix}_{constraint.table.name}_{columns}"


def _existing_unique_sets(inspector, table_name, dialect):
    """Column sets already covered by a unique constraint or unique index."""
    kw = {'include_auto_indexes': True} if dialect.name == 'sqlite' else {}
    sets = {frozenset(u['column_names']) for u in inspector.get_unique_constraints(table_name)}
    sets |= {
        frozenset(i['column_names']) for i in inspector.get_indexes(table_name, **kw)
        if i.get('unique')
    }
    return sets


def _add_missing_constraints(conn, inspector, table, report):
    """Add unique, check and foreign-key constraints absent from an existing table."""
    dialect = conn.dialect
    quote = dialect.identifier_preparer.quote
    sqlite = dialect.name == 'sqlite'

    uniques = _existing_unique_sets(inspector, table.name, dialect)
    checks = {str(c['name']).strip('"') for c in inspector.get_check_constraints(table.name) if c.get('name')}
    foreign_keys = {
        (frozenset(fk['constrained_columns']), fk['referred_table'])
        for fk in inspector.get_foreign_keys(table.name)
    }

    for constraint in sorted(table.constraints, key=lambda c: _constraint_name(c, 'c')):
        if isinstance(constraint, UniqueConstraint):
            name = _constraint_name(constraint, 'uq')
            if frozenset(c.name for c in constraint.columns) in uniques:
                continue
            if sqlite:
                # SQLite cannot ALTER in a constraint; a unique index enforces the same rule
                columns = ', '.join(quote(c.name) for c in constraint.columns)
                conn.exec_driver_sql(
                    f"CREATE UNIQUE INDEX {quote(name)} ON {quote(table.name)} ({columns})"
                )
            else:
                conn.execute(AddConstraint(constraint))
        elif isinstance(constraint, CheckConstraint):
            name = _constraint_name(constraint, 'ck')
            if name in checks:
                continue
            if sqlite:
                report.skipped_constraints.append(f"{table.name}.{name}")
                continue
            conn.execute(AddConstraint(constraint))
        elif isinstance(constraint, ForeignKeyConstraint):
            name = _constraint_name(constraint, 'fk')
            key = (frozenset(c.name for c in constraint.columns), constraint.referred_table.name)
            if key in foreign_keys:
                continue
            if sqlite:
                report.skipped_constraints.append(f"{table.name}.{name}")
                continue
            conn.execute(AddConstraint(constraint))
        else:
            continue
        report.added_constraints.append(f"{table.name}.{name}")


def migrate_schema(db, logger):
    """
    Create missing tables, columns, indexes and constraints.

    Args:
        db: Flask-SQLAlchemy instance bound to the current app
        logger: Application logger

    Returns:
        MigrationReport describing the changes made

    Raises:
        MigrationError: If any DDL statement fails
    """
    report = MigrationReport()
    metadata = db.metadata
    engine = db.engine

    try:
        with engine.begin() as conn:
            existing = set(inspect(conn).get_table_names())
            report.created_tables = [t.name for t in metadata.sorted_tables if t.name not in existing]
            metadata.create_all(bind=conn, checkfirst=True)

            inspector = inspect(conn)
            for table in metadata.sorted_tables:
                if table.name in report.created_tables:
                    continue

                present = {c['name'] for c in inspector.get_columns(table.name)}
                for column in table.columns:
                    if column.name in present:
                        continue
                    if not column.nullable and column.server_default is None:
                        logger.warning(
                            "Adding NOT NULL column as nullable, no server default",
                            extra={'table': table.name, 'column': column.name},
                        )
                    table_name = engine.dialect.identifier_preparer.quote(table.name)
                    conn.exec_driver_sql(
                        f"ALTER TABLE {table_name} ADD COLUMN {_column_ddl(column, engine.dialect)}"
                    )
                    report.added_columns.append(f"{table.name}.{column.name}")

                indexes = {i['name'] for i in inspector.get_indexes(table.name)}
                for index in table.indexes:
                    if index.name in indexes:
                        continue
                    conn.execute(CreateIndex(index))
                    report.added_indexes.append(index.name)

                _add_missing_constraints(conn, inspector, table, report)
    except SQLAlchemyError as e:
        logger.error("Schema migration failed", extra={'error': str(e)})
        raise MigrationError(f"Schema migration failed: {e}") from e

    if report.skipped_constraints:
        logger.warning(
            "Constraints cannot be added to existing tables on this database",
            extra={'constraints': report.skipped_constraints},
        )
    if report.changed:
        logger.info(
            "Schema updated",
            extra={
                'created_tables': report.created_tables,
                'added_columns': report.added_columns,
                'added_indexes': report.added_indexes,
                'added_constraints': report.added_constraints,
            },
        )
    else:
        logger.info("Schema already up to date")
    return report
