"""
Gacha Web API - FastAPI entry point.

Usage:
    uvicorn gacha.app:app --host 0.0.0.0 --port 3000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from gacha.api.routers import gacha_api_router, gacha_router, system_router
from gacha.catalog import CatalogUnavailable
from gacha.config import get_settings
from gacha.version import VERSION

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Report configuration problems on startup."""
    settings = get_settings()
    logger.info(f"Gacha {VERSION} starting, catalog at {settings.catalog_path}")
    if not settings.catalog_path.is_file():
        logger.warning(f"Catalog file {settings.catalog_path} not found, /gacha will fail until it exists")
    yield
    logger.info("Gacha stopped")


app = FastAPI(
    title="Gacha",
    description="Random blind-box purchases within a budget",
    version=VERSION,
    lifespan=lifespan,
)


@app.exception_handler(CatalogUnavailable)
async def catalog_unavailable_handler(request: Request, exc: CatalogUnavailable):
    """Fail the whole request when the catalog cannot be loaded."""
    if request.url.path.startswith("/api/"):
        return JSONResponse(status_code=503, content={"detail": "Catalog unavailable"})
    return PlainTextResponse("Catalog unavailable", status_code=503)


# Include API routers
app.include_router(gacha_router)
app.include_router(gacha_api_router, prefix="/api")
app.include_router(system_router, prefix="/api")

# -----------------------------------------------------------------------------
# Static Files (Web UI)
# -----------------------------------------------------------------------------

public_dir = get_settings().public_dir

if public_dir.is_dir():
    # Mounted last so API routes take precedence
    app.mount("/", StaticFiles(directory=str(public_dir), html=True), name="public")
else:
    logger.warning(f"Public directory {public_dir} not found, static files disabled")
