"""FastAPI dependencies for API routers.

Provides the collaborators that route handlers need, so tests can swap them
through ``app.dependency_overrides``.
"""

import random
from dataclasses import dataclass, field

from gacha.allocator import RandomSource
from gacha.catalog import CatalogLoader
from gacha.config import Settings, get_settings


@dataclass
class GachaDependencies:
    """Dependencies used by the gacha routes.

    Usage:
        @router.get("/endpoint")
        async def my_endpoint(deps: Annotated[GachaDependencies, Depends(get_gacha_deps)]):
            catalog = await deps.loader.load()
            # ...
    """

    settings: Settings
    loader: CatalogLoader
    rng: RandomSource = field(default=random.randrange)


async def get_gacha_deps() -> GachaDependencies:
    """Factory for gacha dependencies built from the current settings."""
    settings = get_settings()
    return GachaDependencies(
        settings=settings,
        loader=CatalogLoader(settings.catalog_path),
    )
