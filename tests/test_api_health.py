"""Tests for health endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient

from tintthat.main import app
from tintthat.store.location import StoreLocation, get_location


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


class TestHealth:
    async def test_health(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "storage": None}

    async def test_ready_with_storage(self, client: AsyncClient, location: StoreLocation) -> None:
        app.dependency_overrides[get_location] = lambda: location

        response = await client.get("/ready")

        assert response.status_code == 200
        assert response.json()["storage"] == "writable"

    async def test_not_ready_without_storage(self, client: AsyncClient, tmp_path) -> None:
        app.dependency_overrides[get_location] = lambda: StoreLocation(root=tmp_path / "missing")

        response = await client.get("/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not ready"
