"""API conftest: an httpx client bound to the app with a per-test store."""

import pytest
from httpx import ASGITransport, AsyncClient

import zetodo.infrastructure.database as db_module
from zetodo.main import app


@pytest.fixture
async def client(db_manager):
    """Client whose routes see a freshly migrated store.

    The ASGI transport does not run the lifespan, so the process-wide
    manager is swapped in here and restored afterwards.
    """
    original_manager = db_module.db_manager
    db_module.db_manager = db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    db_module.db_manager = original_manager


@pytest.fixture
async def unready_client():
    """Client with no store behind it."""
    original_manager = db_module.db_manager
    db_module.db_manager = None

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    db_module.db_manager = original_manager


@pytest.fixture
async def project(client):
    """A project created through the API, as returned (camelCase)."""
    resp = await client.post("/api/v1/projects", json={"name": "API project"})
    assert resp.status_code == 201
    return resp.json()
