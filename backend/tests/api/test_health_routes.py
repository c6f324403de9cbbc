"""Health routes — liveness and storage-aware readiness."""

from signo_connect.infrastructure import database


class _Manager:
    def __init__(self, healthy: bool):
        self.healthy = healthy

    async def health_check(self) -> bool:
        return self.healthy


async def test_liveness(client):
    res = await client.get("/api/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_ready_with_memory_storage(client):
    res = await client.get("/api/health/ready")
    assert res.json() == {"status": "ready", "checks": {"storage": "memory"}}


async def test_not_ready_without_database(client, settings, monkeypatch):
    settings.storage_backend = "database"
    monkeypatch.setattr(database, "db_manager", None)
    res = await client.get("/api/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_not_ready_when_database_unhealthy(client, settings, monkeypatch):
    settings.storage_backend = "database"
    monkeypatch.setattr(database, "db_manager", _Manager(healthy=False))
    assert (await client.get("/api/health/ready")).status_code == 503


async def test_ready_with_healthy_database(client, settings, monkeypatch):
    settings.storage_backend = "database"
    monkeypatch.setattr(database, "db_manager", _Manager(healthy=True))
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"
