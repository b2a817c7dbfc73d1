"""Tests for editor API endpoints."""

from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient

from tintthat.main import app
from tintthat.models.collection import Collection
from tintthat.store import operations
from tintthat.store.location import StoreLocation, get_location
from tintthat.store.operations import (
    get_decoded_collection,
    read_open_collection_id,
    save_collection,
)


@pytest.fixture
async def client(location: StoreLocation):
    """Provide an async test client with storage in a temporary directory."""
    app.dependency_overrides[get_location] = lambda: location

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
async def opened(client: AsyncClient, location: StoreLocation, sample_collection: Collection):
    """Open the sample collection in the editor."""
    save_collection(location, sample_collection)
    response = await client.post(f"/editor/collection/{sample_collection.id}/open")
    assert response.status_code == 200
    return sample_collection


class TestGetEditor:
    async def test_uninitialized(self, client: AsyncClient) -> None:
        response = await client.get("/editor")

        assert response.status_code == 200
        data = response.json()
        assert data["state"] == "uninitialized"
        assert data["collection"] is None
        assert len(data["table"]) == 1
        assert data["table"][0]["header"] is None
        assert data["table"][0]["cells"][0]["kind"] == "empty"

    async def test_reopens_pointer(self, client: AsyncClient, opened: Collection) -> None:
        response = await client.get("/editor")

        data = response.json()
        assert data["state"] == "ready"
        assert data["collection"]["id"] == str(opened.id)
        assert [s["header"] for s in data["table"]] == ["Beach", "Forest"]
        assert data["table"][0]["cells"][2] == {
            "kind": "color",
            "text": None,
            "section": 0,
            "row": 2,
            "color": "#0000FF80",
        }


class TestCreateCollection:
    async def test_create(self, client: AsyncClient, location: StoreLocation) -> None:
        response = await client.post("/editor/collection", json={"title": "Vacation"})

        assert response.status_code == 200
        data = response.json()
        assert data["state"] == "ready"
        assert data["message"] == "Created"
        assert data["saved"] is True
        assert data["change"]["kind"] == "reload"
        assert data["collection"]["title"] == "Vacation"
        assert data["collection"]["is_empty"] is True
        assert str(read_open_collection_id(location)) == data["collection"]["id"]

    async def test_create_seeded(self, client: AsyncClient) -> None:
        response = await client.post(
            "/editor/collection", json={"title": "Vacation", "seed": True}
        )

        palettes = response.json()["collection"]["palettes"]
        assert [p["title"] for p in palettes] == ["My Palette"]
        assert len(palettes[0]["colors"]) == 3

    async def test_blank_title_rejected(self, client: AsyncClient) -> None:
        response = await client.post("/editor/collection", json={"title": "  "})

        assert response.status_code == 400
        data = response.json()
        assert data["outcome"] == "known_failure"
        assert data["failure"]["kind"] == "invalid_input"

    async def test_save_failure_reported(
        self, client: AsyncClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def failing_write(path, data):
            raise OSError("disk full")

        monkeypatch.setattr(operations, "_write_atomic", failing_write)

        response = await client.post("/editor/collection", json={"title": "Vacation"})

        assert response.status_code == 200
        assert response.json()["saved"] is False
        assert response.json()["message"] == "Not created, try again!"


class TestOpenCollection:
    async def test_open_missing(self, client: AsyncClient) -> None:
        response = await client.post(f"/editor/collection/{uuid4()}/open")

        assert response.status_code == 404
        assert response.json()["failure"]["kind"] == "not_found"

    async def test_open_invalid_id(self, client: AsyncClient) -> None:
        response = await client.post("/editor/collection/not-a-uuid/open")
        assert response.status_code == 422


class TestRenameAndDelete:
    async def test_rename(
        self, client: AsyncClient, location: StoreLocation, opened: Collection
    ) -> None:
        response = await client.patch("/editor/collection", json={"title": "Holiday"})

        assert response.status_code == 200
        assert response.json()["collection"]["title"] == "Holiday"
        stored = get_decoded_collection(location, opened.id)
        assert stored is not None
        assert stored.title == "Holiday"

    async def test_rename_without_collection(self, client: AsyncClient) -> None:
        response = await client.patch("/editor/collection", json={"title": "Holiday"})

        assert response.status_code == 409
        assert response.json()["failure"]["kind"] == "no_open_collection"

    async def test_delete(
        self, client: AsyncClient, location: StoreLocation, opened: Collection
    ) -> None:
        response = await client.delete("/editor/collection")

        assert response.status_code == 200
        data = response.json()
        assert data["state"] == "uninitialized"
        assert data["message"] == "Deleted"
        assert get_decoded_collection(location, opened.id) is None
        assert read_open_collection_id(location) is None

        follow_up = await client.get("/editor")
        assert follow_up.json()["state"] == "uninitialized"


class TestPalettes:
    async def test_add_palette_without_collection_is_ignored(self, client: AsyncClient) -> None:
        response = await client.post("/editor/palettes")

        assert response.status_code == 200
        data = response.json()
        assert data["state"] == "uninitialized"
        assert data["change"]["kind"] == "none"

    async def test_add_default_palette(self, client: AsyncClient, opened: Collection) -> None:
        response = await client.post("/editor/palettes")

        data = response.json()
        assert data["change"] == {"kind": "insert_section", "section": 2, "row": None}
        added = data["collection"]["palettes"][2]
        assert added["title"] == "Added"
        assert added["colors"] == ["#000000FF", "#00FFFFFF"]

    async def test_add_custom_palette(self, client: AsyncClient, opened: Collection) -> None:
        response = await client.post(
            "/editor/palettes",
            json={"title": "Sunset", "colors": ["#FF8800", "#22003380"]},
        )

        added = response.json()["collection"]["palettes"][2]
        assert added["title"] == "Sunset"
        assert added["colors"] == ["#FF8800FF", "#22003380"]

    async def test_add_palette_invalid_color(self, client: AsyncClient, opened: Collection) -> None:
        response = await client.post("/editor/palettes", json={"colors": ["orange"]})

        assert response.status_code == 400
        assert "invalid color" in response.json()["detail"].lower()

    async def test_delete_palette(self, client: AsyncClient, opened: Collection) -> None:
        response = await client.delete("/editor/palettes/0")

        data = response.json()
        assert data["change"]["kind"] == "delete_section"
        assert data["collection"]["palette_count"] == 1
        assert data["table"][0]["header"] == "Forest"

    async def test_delete_palette_out_of_range(
        self, client: AsyncClient, opened: Collection
    ) -> None:
        response = await client.delete("/editor/palettes/7")

        assert response.status_code == 404
        assert response.json()["failure"]["kind"] == "index_out_of_range"

    async def test_rename_palette(self, client: AsyncClient, opened: Collection) -> None:
        response = await client.put("/editor/palettes/1/title", json={"title": "Woods"})

        data = response.json()
        assert data["change"] == {"kind": "reload_section", "section": 1, "row": None}
        assert data["table"][1]["header"] == "Woods"


class TestColors:
    async def test_add_color(
        self, client: AsyncClient, location: StoreLocation, opened: Collection
    ) -> None:
        response = await client.post("/editor/palettes/1/colors")

        data = response.json()
        assert data["change"] == {"kind": "insert_row", "section": 1, "row": 2}
        assert data["table"][1]["cells"][2]["color"] == "#FFFFFFFF"
        stored = get_decoded_collection(location, opened.id)
        assert stored is not None
        assert stored.number_of_colors(1) == 3

    async def test_set_color(self, client: AsyncClient, opened: Collection) -> None:
        response = await client.put("/editor/palettes/0/colors/1", json={"color": "#123456"})

        data = response.json()
        assert data["change"] == {"kind": "reload_row", "section": 0, "row": 1}
        assert data["collection"]["palettes"][0]["colors"][1] == "#123456FF"

    async def test_set_color_out_of_range(self, client: AsyncClient, opened: Collection) -> None:
        response = await client.put("/editor/palettes/0/colors/9", json={"color": "#123456"})
        assert response.status_code == 404

    async def test_set_color_invalid(self, client: AsyncClient, opened: Collection) -> None:
        response = await client.put("/editor/palettes/0/colors/0", json={"color": "#12"})
        assert response.status_code == 400
