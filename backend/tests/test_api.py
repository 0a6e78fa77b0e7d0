"""API route tests."""

import pytest

from bootstrap_theme.main import app
from bootstrap_theme.services.theme_alters import ThemeContext
from bootstrap_theme.services.theme_service import ThemeService


@pytest.mark.asyncio
async def test_css_class(client):
    response = await client.post("/api/v1/classification/css-class", json={"label": "Delete item"})
    assert response.status_code == 200
    assert response.json() == {"label": "Delete item", "category": "danger", "matched": True}


@pytest.mark.asyncio
async def test_css_class_default(client):
    response = await client.post(
        "/api/v1/classification/css-class", json={"label": "Random text", "default": "default"}
    )
    assert response.json() == {"label": "Random text", "category": "default", "matched": False}


@pytest.mark.asyncio
async def test_css_class_requires_label(client):
    response = await client.post("/api/v1/classification/css-class", json={})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_css_class_batch_keeps_order(client):
    labels = ["Confirm and Add", "SAVE CHANGES", "Preview"]
    response = await client.post("/api/v1/classification/batch", json={"labels": labels})
    assert response.status_code == 200
    data = response.json()
    assert [item["label"] for item in data] == labels
    assert [item["category"] for item in data] == ["primary", "success", ""]
    assert [item["matched"] for item in data] == [True, True, False]


@pytest.mark.asyncio
async def test_icon(client):
    response = await client.post("/api/v1/classification/icon", json={"label": "Upload file"})
    assert response.status_code == 200
    icon = response.json()["icon"]
    assert icon["name"] == "upload"
    assert icon["classes"] == ["icon", "glyphicon", "glyphicon-upload"]
    assert icon["attributes"] == {"aria-hidden": "true"}


@pytest.mark.asyncio
async def test_icon_no_match(client):
    response = await client.post("/api/v1/classification/icon", json={"label": "Preview"})
    assert response.json() == {"label": "Preview", "icon": None}


@pytest.mark.asyncio
async def test_list_glyphicons(client):
    response = await client.get("/api/v1/glyphicons")
    data = response.json()
    assert data["version"] == "3.3.5"
    assert len(data["icons"]) == 263
    assert data["icons"] == sorted(data["icons"])


@pytest.mark.asyncio
async def test_list_glyphicons_for_version(client):
    response = await client.get("/api/v1/glyphicons", params={"version": "3.0.0"})
    assert response.json()["version"] == "3.0.0"
    assert "btc" not in response.json()["icons"]


@pytest.mark.asyncio
async def test_list_glyphicons_reports_theme_version(client):
    app.state.theme_service = ThemeService(ThemeContext(framework_version="3.0.0"))
    response = await client.get("/api/v1/glyphicons")
    data = response.json()
    assert data["version"] == "3.0.0"
    assert len(data["icons"]) == 200


@pytest.mark.asyncio
async def test_list_glyphicons_unknown_version(client):
    response = await client.get("/api/v1/glyphicons", params={"version": "4.0.0"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_get_glyphicon(client):
    response = await client.get("/api/v1/glyphicons/trash")
    assert response.status_code == 200
    assert response.json()["classes"][-1] == "glyphicon-trash"


@pytest.mark.asyncio
async def test_get_glyphicon_not_found(client):
    response = await client.get("/api/v1/glyphicons/unicorn")
    assert response.status_code == 404
    assert response.json()["detail"] == "Glyphicon 'unicorn' not found"


@pytest.mark.asyncio
async def test_get_glyphicon_disabled(client):
    app.state.theme_service = ThemeService(ThemeContext(glyphicons_enabled=False))
    response = await client.get("/api/v1/glyphicons/trash")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_get_table(client):
    response = await client.get("/api/v1/tables/css_class")
    assert response.status_code == 200
    data = response.json()
    assert data["kind"] == "css_class"
    assert data["epoch"] == 0
    assert list(data["contains"])[:5] == ["Confirm", "Filter", "Submit", "Search", "Add"]
    assert data["exact"]["Download feature"] == "primary"


@pytest.mark.asyncio
async def test_get_unknown_table(client):
    response = await client.get("/api/v1/tables/buttons")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_clear_tables(client, theme_service):
    theme_service.table("icon")

    response = await client.post("/api/v1/tables/cache/clear")

    assert response.json() == {"epoch": 1}
    assert not theme_service.tables.is_built("icon")
    response = await client.get("/api/v1/tables/icon")
    assert response.json()["epoch"] == 1


@pytest.mark.asyncio
async def test_docs_search(client):
    response = await client.get("/api/v1/docs-search", params={"query": "glyphicon"})
    assert response.json() == {
        "url": "http://drupal-bootstrap.org/api/bootstrap/8.x-3.x/search/glyphicon"
    }
