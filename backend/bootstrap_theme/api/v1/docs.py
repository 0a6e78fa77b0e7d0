"""Documentation search API route."""

from fastapi import APIRouter, Depends

from bootstrap_theme.api.deps import get_theme_service
from bootstrap_theme.schemas.docs import DocsSearchResponse
from bootstrap_theme.services.theme_service import ThemeService

router = APIRouter()


@router.get("", response_model=DocsSearchResponse)
async def docs_search(
    query: str = "",
    service: ThemeService = Depends(get_theme_service),
):
    """Documentation search URL for a function or class name."""
    return {"url": service.api_search_url(query)}
