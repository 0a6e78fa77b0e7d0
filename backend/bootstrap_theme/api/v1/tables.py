"""Pattern table API routes."""

from fastapi import APIRouter, Depends

from bootstrap_theme.api.deps import get_theme_service
from bootstrap_theme.core.exceptions import NotFoundError
from bootstrap_theme.schemas.table import CacheClearResponse, PatternTableResponse
from bootstrap_theme.services.pattern_tables import TableKind
from bootstrap_theme.services.theme_service import ThemeService

router = APIRouter()


@router.post("/cache/clear", response_model=CacheClearResponse)
async def clear_tables(service: ThemeService = Depends(get_theme_service)):
    """Invalidate the built tables; they are rebuilt (and re-altered) on next use."""
    return {"epoch": service.clear_cache()}


@router.get("/{kind}", response_model=PatternTableResponse)
async def get_table(
    kind: str,
    service: ThemeService = Depends(get_theme_service),
):
    """Return a built pattern table, building it if needed."""
    try:
        table_kind = TableKind(kind)
    except ValueError:
        raise NotFoundError(f"Pattern table '{kind}'") from None
    table = service.table(table_kind)
    return {"kind": table_kind.value, "epoch": service.tables.epoch, **table.to_dict()}
