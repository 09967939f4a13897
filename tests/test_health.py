"""Health check endpoint tests."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient):
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["version"] == "0.1.0"
    assert data["status"] == "ok"
    assert data["db"] == "ok"
    assert data["redis"] == "ok"
