"""Bootstrap theme API: main entry point."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bootstrap_theme.config import settings
from bootstrap_theme.core.middleware import RequestLoggingMiddleware
from bootstrap_theme.services.theme_service import ThemeService

logger = structlog.get_logger()

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: build the theme service once per process."""
    # Startup
    if getattr(app.state, "theme_service", None) is None:
        app.state.theme_service = ThemeService.from_settings(settings)
    logger.info("Starting Bootstrap theme API", env=settings.app_env, theme=settings.theme_name)
    yield
    # Shutdown
    logger.info("Shutting down Bootstrap theme API")


app = FastAPI(
    title="Bootstrap theme API",
    description="Bootstrap classes and glyphicons guessed from UI labels",
    version=VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    redirect_slashes=False,
)

# ── Middleware ─────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)


# ── Health Check ──────────────────────────────────
@app.get("/health", tags=["system"])
async def health_check():
    """Liveness probe: always healthy while the process runs."""
    return {"status": "healthy", "version": VERSION}


# ── API Routes ────────────────────────────────────
from bootstrap_theme.api.v1 import classification, docs, glyphicons, tables  # noqa: E402

app.include_router(classification.router, prefix="/api/v1/classification", tags=["classification"])
app.include_router(glyphicons.router, prefix="/api/v1/glyphicons", tags=["glyphicons"])
app.include_router(tables.router, prefix="/api/v1/tables", tags=["tables"])
app.include_router(docs.router, prefix="/api/v1/docs-search", tags=["docs"])
