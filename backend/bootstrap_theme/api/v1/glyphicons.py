"""Glyphicon API routes."""

from fastapi import APIRouter, Depends

from bootstrap_theme.api.deps import get_theme_service
from bootstrap_theme.core.exceptions import NotFoundError
from bootstrap_theme.schemas.icon import GlyphiconListResponse, IconElement
from bootstrap_theme.services.glyphicons import GLYPHICON_VERSIONS, resolve_version
from bootstrap_theme.services.theme_service import ThemeService

router = APIRouter()


@router.get("", response_model=GlyphiconListResponse)
async def list_glyphicons(
    version: str | None = None,
    service: ThemeService = Depends(get_theme_service),
):
    """List icon names for a framework version (the theme's when omitted)."""
    if version is not None and version not in GLYPHICON_VERSIONS:
        raise NotFoundError(f"Bootstrap version {version}")
    served = resolve_version(version or service.context.framework_version)
    return {"version": served, "icons": sorted(service.glyphicons(served).values())}


@router.get("/{name}", response_model=IconElement)
async def get_glyphicon(
    name: str,
    service: ThemeService = Depends(get_theme_service),
):
    """Return the icon element for a glyphicon the active theme can render."""
    icon = service.glyphicon(name)
    if icon is None:
        raise NotFoundError(f"Glyphicon '{name}'")
    return icon
