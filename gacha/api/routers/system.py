"""System API routes for health and version."""

from typing import Any

from fastapi import APIRouter, Depends
from typing_extensions import Annotated

from gacha.api.dependencies import GachaDependencies, get_gacha_deps
from gacha.version import VERSION

router = APIRouter(tags=["system"])


@router.get("/health")
async def health(
    deps: Annotated[GachaDependencies, Depends(get_gacha_deps)],
) -> dict[str, Any]:
    """Health check endpoint."""
    available = deps.loader.exists()
    return {
        "status": "healthy" if available else "degraded",
        "catalog_available": available,
    }


@router.get("/version")
async def version() -> dict[str, str]:
    """Return the application version."""
    return {"version": VERSION}
