"""Label classification API routes."""

from fastapi import APIRouter, Depends

from bootstrap_theme.api.deps import get_theme_service
from bootstrap_theme.schemas.classification import (
    CssClassBatchRequest,
    CssClassRequest,
    CssClassResponse,
    IconRequest,
    IconResponse,
)
from bootstrap_theme.services.theme_service import ThemeService

router = APIRouter()


def _css_class_result(service: ThemeService, label: str, default: str) -> dict:
    category = service.match_css_class(label)
    return {
        "label": label,
        "category": category if category is not None else default,
        "matched": category is not None,
    }


@router.post("/css-class", response_model=CssClassResponse)
async def classify_css_class(
    data: CssClassRequest,
    service: ThemeService = Depends(get_theme_service),
):
    """Guess the Bootstrap contextual class for a button label."""
    return _css_class_result(service, data.label, data.default)


@router.post("/batch", response_model=list[CssClassResponse])
async def classify_css_class_batch(
    data: CssClassBatchRequest,
    service: ThemeService = Depends(get_theme_service),
):
    """Guess contextual classes for several labels, in request order."""
    return [_css_class_result(service, label, data.default) for label in data.labels]


@router.post("/icon", response_model=IconResponse)
async def classify_icon(
    data: IconRequest,
    service: ThemeService = Depends(get_theme_service),
):
    """Guess the glyphicon for a button label; ``icon`` is null when none applies."""
    return {"label": data.label, "icon": service.glyphicon_from_string(data.label)}
