import pytest
from httpx import AsyncClient, ASGITransport

from lightbnb.database import get_session
from lightbnb.main import app


@pytest.fixture
def client_with_session(fake_session):
    async def override_get_session():
        yield fake_session

    app.dependency_overrides[get_session] = override_get_session
    yield fake_session
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_health_reports_database_up(client_with_session):
    client_with_session.scalar = 3
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["database"] == "up"
    assert body["active_properties_count"] == 3
    assert body["config"]["db_url_set"] is True


@pytest.mark.asyncio
async def test_health_reports_degraded_when_database_down(client_with_session):
    client_with_session.error = ConnectionRefusedError("could not connect")
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/health")

    body = response.json()
    assert response.status_code == 200
    assert body["status"] == "degraded"
    assert body["database"].startswith("down:")
    assert "active_properties_count" not in body
