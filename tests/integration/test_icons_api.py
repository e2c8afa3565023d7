"""Integration tests for the icon endpoints."""

import pytest
from httpx import AsyncClient

from icon_catalog.config import settings


@pytest.mark.asyncio
async def test_get_icon(client: AsyncClient):
    response = await client.get("/api/v1/icons/ChatNotificationBell")

    assert response.status_code == 200
    data = response.json()
    assert data["category"] == "Communication"
    assert data["kebab_name"] == "chat-notification-bell"
    assert {"chat", "notification", "bell", "ring"} <= set(data["tags"])


@pytest.mark.asyncio
async def test_classify_batch_keeps_request_order(client: AsyncClient):
    response = await client.post(
        "/api/v1/icons/classify",
        json={"identifiers": ["Widget123XYZ", "AddUser", "Widget123XYZ"]},
    )

    assert response.status_code == 200
    icons = response.json()["icons"]
    assert [i["name"] for i in icons] == ["Widget123XYZ", "AddUser", "Widget123XYZ"]
    assert icons[0]["category"] == "Other"
    assert icons[1]["category"] == "Actions"


@pytest.mark.asyncio
async def test_classify_rejects_empty_identifier(client: AsyncClient):
    response = await client.post("/api/v1/icons/classify", json={"identifiers": ["Lock", "  "]})

    assert response.status_code == 400
    assert response.json()["error_code"] == "VAL_001"


@pytest.mark.asyncio
async def test_classify_rejects_empty_list(client: AsyncClient):
    response = await client.post("/api/v1/icons/classify", json={"identifiers": []})

    assert response.status_code == 400
    assert response.json()["error_code"] == "VAL_001"


@pytest.mark.asyncio
async def test_list_categories(client: AsyncClient):
    response = await client.get("/api/v1/icons/categories")

    assert response.status_code == 200
    categories = [c["category"] for c in response.json()]
    assert categories[0] == "Navigation"
    assert categories[8] == "AI & Automation"
    assert categories[-1] == "Other"
    assert len(categories) == 15


@pytest.mark.asyncio
async def test_catalog_from_configured_directory(client: AsyncClient, icons_dir, monkeypatch):
    monkeypatch.setattr(settings, "icons_dir", icons_dir)

    response = await client.get("/api/v1/icons/catalog")

    assert response.status_code == 200
    data = response.json()
    assert data["summary"]["total"] == 7
    assert data["summary"]["uncategorized"] == ["Widget123XYZ"]
    assert data["catalog"]["groups"][0]["category"] == "Navigation"
    assert data["catalog"]["groups"][-1]["category"] == "Other"


@pytest.mark.asyncio
async def test_catalog_missing_directory(client: AsyncClient, tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "icons_dir", tmp_path / "missing")

    response = await client.get("/api/v1/icons/catalog")

    assert response.status_code == 404
    assert response.json()["error_code"] == "ICON_001"


@pytest.mark.asyncio
async def test_catalog_lookup(client: AsyncClient, icons_dir, monkeypatch):
    monkeypatch.setattr(settings, "icons_dir", icons_dir)

    response = await client.get("/api/v1/icons/catalog/Lock")

    assert response.status_code == 200
    assert response.json()["category"] == "Security"


@pytest.mark.asyncio
async def test_catalog_lookup_unknown_icon(client: AsyncClient, icons_dir, monkeypatch):
    monkeypatch.setattr(settings, "icons_dir", icons_dir)

    response = await client.get("/api/v1/icons/catalog/Unicorn")

    assert response.status_code == 404
    assert response.json()["error_code"] == "ICON_005"


@pytest.mark.asyncio
async def test_classify_route_names_as_identifiers(client: AsyncClient):
    response = await client.post("/api/v1/icons/classify", json={"identifiers": ["catalog", "categories"]})

    assert response.status_code == 200
    assert [i["name"] for i in response.json()["icons"]] == ["catalog", "categories"]


@pytest.mark.asyncio
async def test_get_icon_non_ascii(client: AsyncClient):
    response = await client.get("/api/v1/icons/ÉtoileStar")

    assert response.status_code == 200
    data = response.json()
    assert data["kebab_name"] == "étoile-star"
    assert {"étoile", "star"} <= set(data["tags"])
