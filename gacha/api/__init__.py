"""Gacha API package.

Contains FastAPI routers for the web API.
"""

from gacha.api.dependencies import GachaDependencies

__all__ = ["GachaDependencies"]
