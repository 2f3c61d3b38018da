"""Health routes: liveness metadata and store readiness."""


async def test_liveness_reports_app_metadata(client):
    resp = await client.get("/api/v1/health/")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "healthy"
    assert data["name"] == "ZeTodo"
    assert data["version"]


async def test_ready_with_migrated_store(client):
    resp = await client.get("/api/v1/health/ready")
    assert resp.status_code == 200
    assert resp.json()["schema_version"] == 2


async def test_not_ready_without_store(unready_client):
    resp = await unready_client.get("/api/v1/health/ready")
    assert resp.status_code == 503
    assert resp.json()["status"] == "not_ready"
