"""Tests for application-level endpoints and startup."""

import pytest

from src.core.database import close_database
from src.core.database import init_database
from src.core.database import ping_database


@pytest.fixture
def database_up(monkeypatch):
    async def _ping() -> bool:
        return True

    monkeypatch.setattr("src.main.ping_database", _ping)


async def test_api_test_route(client, database_up):
    response = await client.get("/api/test")

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "API server is running!"
    assert body["database"] == "connected"


async def test_health_route(client, database_up):
    response = await client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "OK"
    assert body["database"] == "connected"
    assert body["environment"] == "testing"


async def test_init_database_creates_schema():
    await init_database()
    try:
        assert await ping_database()
    finally:
        await close_database()
