"""Schema Manager: forward-only, ordered, idempotent schema migrations.

Invariants:
    - schema_version holds one row per applied step; current version = MAX(version), 0 when empty
    - Steps run in ascending version order; a step runs only when current < step.version
    - A step's DDL and its version row commit together; a failed step is rolled back
      and raises MigrationError, steps before it stay applied
    - Running apply_migrations on an up-to-date store changes nothing

Design Decisions:
    - Own version table instead of alembic_version: one integer per step, readable by
      any SQLite client (the desktop store file predates this package)
    - alembic Operations used for the DDL itself: same op.create_table/op.add_column
      vocabulary as revision files, bound to our connection via MigrationContext
    - One module per step, registered explicitly below (no directory scanning)
    - Step atomicity relies on transactional SQLite DDL, which the engine from
      infrastructure.database.build_engine turns on
"""

import logging
from typing import Callable, NamedTuple

from alembic.migration import MigrationContext
from alembic.operations import Operations
from sqlalchemy import Connection, func, insert, select
from sqlalchemy.exc import SQLAlchemyError

from zetodo.core.errors import MigrationError
from zetodo.db.migrations import v001_initial_schema, v002_card_scheduling
from zetodo.models.schema_version import SchemaVersionRecord

logger = logging.getLogger(__name__)


class MigrationStep(NamedTuple):
    version: int
    description: str
    upgrade: Callable[[Operations], None]


MIGRATIONS: tuple[MigrationStep, ...] = (
    MigrationStep(
        v001_initial_schema.version,
        v001_initial_schema.description,
        v001_initial_schema.upgrade,
    ),
    MigrationStep(
        v002_card_scheduling.version,
        v002_card_scheduling.description,
        v002_card_scheduling.upgrade,
    ),
)

LATEST_VERSION = MIGRATIONS[-1].version

_version_table = SchemaVersionRecord.__table__


def get_schema_version(connection: Connection) -> int:
    """Highest applied version, 0 for a fresh store."""
    return connection.execute(
        select(func.coalesce(func.max(_version_table.c.version), 0)),
    ).scalar_one()


def apply_migrations(
    connection: Connection,
    steps: tuple[MigrationStep, ...] = MIGRATIONS,
) -> int:
    """Bring the schema up to the last step. Returns the resulting version."""
    try:
        _version_table.create(connection, checkfirst=True)
        connection.commit()
        current = get_schema_version(connection)
    except SQLAlchemyError as e:
        connection.rollback()
        logger.error(f"Cannot read schema version: {e}")
        raise MigrationError(0, e) from e

    logger.info(
        f"Current database version: {current}",
        extra={"schema_version": current},
    )
    op = Operations(MigrationContext.configure(connection))

    for step in steps:
        if current >= step.version:
            continue
        logger.info(f"Running migration v{step.version}: {step.description}")
        try:
            step.upgrade(op)
            connection.execute(
                insert(_version_table).values(version=step.version),
            )
            connection.commit()
        except SQLAlchemyError as e:
            connection.rollback()
            logger.error(
                f"Migration v{step.version} failed: {e}",
                extra={"schema_version": current},
            )
            raise MigrationError(step.version, e) from e
        current = step.version
        logger.info(
            f"Migration v{step.version} completed",
            extra={"schema_version": current},
        )

    return current
