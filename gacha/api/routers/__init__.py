"""API routers for the gacha service."""

from gacha.api.routers.gacha import api_router as gacha_api_router
from gacha.api.routers.gacha import router as gacha_router
from gacha.api.routers.system import router as system_router

__all__ = [
    "gacha_router",
    "gacha_api_router",
    "system_router",
]
