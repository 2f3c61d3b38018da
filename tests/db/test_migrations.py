"""Schema Manager: verifies ordered, idempotent, forward-only migrations.

Tests:
    - Fresh store reaches the latest version with every table and index
    - Running twice leaves the schema and schema_version unchanged
    - A store at v1 is brought to v2 and existing cards get priority 'low'
    - A failing step raises MigrationError and leaves neither its DDL nor its version
      behind, so a corrected step applies cleanly on the next run
    - Foreign keys cascade from projects and columns
"""

import pytest
from alembic.operations import Operations
import sqlalchemy as sa
from sqlalchemy import text

from zetodo.core.errors import MigrationError, StoreErrorKind
from zetodo.db.migrations import (
    LATEST_VERSION, MIGRATIONS, MigrationStep, apply_migrations, get_schema_version,
)
from zetodo.infrastructure.database import build_engine


@pytest.fixture
def engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'schema.db'}")
    yield engine
    engine.dispose()


def _schema(conn) -> list[tuple]:
    return conn.execute(text(
        "SELECT type, name, tbl_name, sql FROM sqlite_master ORDER BY type, name",
    )).all()


def _versions(conn) -> list[int]:
    return conn.execute(
        text("SELECT version FROM schema_version ORDER BY version"),
    ).scalars().all()


def test_fresh_store_reaches_latest_version(engine):
    with engine.connect() as conn:
        assert apply_migrations(conn) == LATEST_VERSION == 2
        assert get_schema_version(conn) == 2
        assert _versions(conn) == [1, 2]


def test_fresh_store_has_all_tables_and_indexes(engine):
    with engine.connect() as conn:
        apply_migrations(conn)
        names = {row[1] for row in _schema(conn)}
    assert {
        "projects", "columns", "cards", "settings", "activities", "schema_version",
    } <= names
    assert {
        "idx_cards_project_id", "idx_cards_column_id",
        "idx_columns_project_id", "idx_activities_project_id",
    } <= names


def test_v2_adds_card_scheduling_columns(engine):
    with engine.connect() as conn:
        apply_migrations(conn)
        columns = {row[1] for row in conn.execute(text("PRAGMA table_info(cards)"))}
    assert {"priority", "start_date", "due_date"} <= columns


def test_running_twice_is_idempotent(engine):
    with engine.connect() as conn:
        apply_migrations(conn)
        before = _schema(conn)
        assert apply_migrations(conn) == 2
        assert _schema(conn) == before
        assert _versions(conn) == [1, 2]


def test_idempotent_across_connections(engine):
    with engine.connect() as conn:
        apply_migrations(conn)
    with engine.connect() as conn:
        assert apply_migrations(conn) == 2
        assert _versions(conn) == [1, 2]


def test_upgrade_from_v1_defaults_existing_cards(engine):
    with engine.connect() as conn:
        assert apply_migrations(conn, steps=MIGRATIONS[:1]) == 1
        conn.execute(text(
            "INSERT INTO projects VALUES ('p1', 'P', NULL, 't', 't')",
        ))
        conn.execute(text(
            "INSERT INTO columns VALUES ('c1', 'p1', 'C', 0, NULL, 't', 't')",
        ))
        conn.execute(text(
            "INSERT INTO cards (id, project_id, column_id, title, position, created_at, updated_at) "
            "VALUES ('k1', 'p1', 'c1', 'K', 0, 't', 't')",
        ))
        conn.commit()

        assert apply_migrations(conn) == 2
        row = conn.execute(text(
            "SELECT priority, start_date, due_date, completed FROM cards WHERE id = 'k1'",
        )).one()
    assert tuple(row) == ("low", None, None, 0)


def _card_columns(conn) -> set[str]:
    return {row[1] for row in conn.execute(text("PRAGMA table_info(cards)"))}


def test_failing_step_leaves_no_partial_schema(engine):
    def half_done(op: Operations) -> None:
        op.add_column("cards", sa.Column("estimate", sa.Integer, nullable=True))
        op.execute("CREATE TABLE projects (id TEXT)")  # already exists

    with engine.connect() as conn:
        with pytest.raises(MigrationError) as exc_info:
            apply_migrations(conn, steps=MIGRATIONS + (MigrationStep(3, "half", half_done),))
        assert get_schema_version(conn) == 2
        assert "estimate" not in _card_columns(conn)

    assert exc_info.value.version == 3
    assert exc_info.value.kind is StoreErrorKind.ENGINE
    assert exc_info.value.cause is not None


def test_corrected_step_applies_after_failure(engine):
    def broken(op: Operations) -> None:
        op.add_column("cards", sa.Column("estimate", sa.Integer, nullable=True))
        op.execute("CREATE TABLE projects (id TEXT)")

    def fixed(op: Operations) -> None:
        op.add_column("cards", sa.Column("estimate", sa.Integer, nullable=True))

    with engine.connect() as conn:
        with pytest.raises(MigrationError):
            apply_migrations(conn, steps=MIGRATIONS + (MigrationStep(3, "broken", broken),))
        assert apply_migrations(conn, steps=MIGRATIONS + (MigrationStep(3, "fixed", fixed),)) == 3
        assert "estimate" in _card_columns(conn)
        assert _versions(conn) == [1, 2, 3]


def test_steps_are_ordered_and_contiguous():
    assert [s.version for s in MIGRATIONS] == list(range(1, len(MIGRATIONS) + 1))


def test_foreign_keys_declared_with_cascade(engine):
    with engine.connect() as conn:
        apply_migrations(conn)
        card_fks = conn.execute(text("PRAGMA foreign_key_list(cards)")).all()
        column_fks = conn.execute(text("PRAGMA foreign_key_list(columns)")).all()
    # (id, seq, table, from, to, on_update, on_delete, match)
    assert {(fk[2], fk[3], fk[6]) for fk in card_fks} == {
        ("projects", "project_id", "CASCADE"),
        ("columns", "column_id", "CASCADE"),
    }
    assert {(fk[2], fk[3], fk[6]) for fk in column_fks} == {
        ("projects", "project_id", "CASCADE"),
    }
