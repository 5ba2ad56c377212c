"""
Gacha - Random blind-box purchases within a budget.

Usage:
    from gacha import CatalogLoader, allocate

    catalog = await CatalogLoader("data/menu.csv").load()
    items = allocate(catalog, 1000)
"""

from gacha.allocator import RandomSource, allocate, draw
from gacha.catalog import CatalogLoader, CatalogUnavailable, parse_catalog
from gacha.config import Settings, get_settings
from gacha.models import GachaResult, Item
from gacha.render import render_selection

__all__ = [
    "Item",
    "GachaResult",
    "RandomSource",
    "allocate",
    "draw",
    "CatalogLoader",
    "CatalogUnavailable",
    "parse_catalog",
    "render_selection",
    "Settings",
    "get_settings",
]
