"""Root conftest: shared test configuration and store fixtures.

Invariants:
    - Every test that touches the store gets a fresh, fully migrated SQLite file
    - Settings never point at the real user data directory
"""

import os

import pytest

# Must be set before zetodo.config.get_settings() is first called
os.environ.setdefault("ZETODO_DATABASE_PATH", ":memory:")
os.environ.setdefault("ZETODO_LOG_FORMAT", "text")

from zetodo.infrastructure.database import DatabaseSessionManager  # noqa: E402
from zetodo.schemas.board import Project  # noqa: E402
from zetodo.services.board_store import BoardStore  # noqa: E402
from zetodo.services.project_store import ProjectStore  # noqa: E402


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'zetodo.db'}"


@pytest.fixture
def db_manager(database_url):
    manager = DatabaseSessionManager(database_url)
    manager.initialize()
    yield manager
    manager.close()


@pytest.fixture
def project_store(db_manager):
    return ProjectStore(db_manager)


@pytest.fixture
def board_store(db_manager):
    return BoardStore(db_manager)


@pytest.fixture
def seed_project(project_store):
    """A project with its three default columns."""
    return project_store.create(Project(name="Seed project"))
