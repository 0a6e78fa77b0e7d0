"""Shared test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from bootstrap_theme.main import app
from bootstrap_theme.services.theme_service import ThemeService


@pytest.fixture
def theme_service():
    """A fresh theme service with the default tables and no overrides."""
    return ThemeService()


@pytest.fixture
async def client(theme_service):
    """Async test client for the FastAPI app, bound to ``theme_service``."""
    app.state.theme_service = theme_service
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.state.theme_service = None
