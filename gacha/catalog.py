"""
Catalog - Loads the item catalog from a CSV file.

Usage:
    from gacha.catalog import CatalogLoader

    loader = CatalogLoader("data/menu.csv")
    catalog = await loader.load()   # list[Item]

The file needs a header row with at least ``name`` and ``price`` columns.
Prices are parsed to integers; every other column is kept as text on
``Item.extra``.
"""

import asyncio
import csv
import logging
from pathlib import Path
from typing import Iterable

from gacha.models import Item

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("name", "price")


class CatalogUnavailable(Exception):
    """The catalog source could not be read or parsed."""

    def __init__(self, path: Path | str, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Catalog {self.path} unavailable: {reason}")


def _parse_price(raw: str | None) -> int:
    if raw is None or not raw.strip():
        raise ValueError("missing price")
    price = int(raw.strip())
    if price < 0:
        raise ValueError(f"negative price {price}")
    return price


def parse_catalog(rows: Iterable[dict[str, str]], source: Path | str = "<rows>") -> list[Item]:
    """Build catalog items from CSV rows.

    Args:
        rows: Mappings of column name to text, as produced by ``csv.DictReader``
        source: Where the rows came from, used in error messages

    Returns:
        Items in row order

    Raises:
        CatalogUnavailable: If a row has no name or an unusable price
    """
    items = []
    # Row 1 is the header
    for line, row in enumerate(rows, start=2):
        name = row.get("name")
        if name is None:
            raise CatalogUnavailable(source, f"row {line} has no name")
        try:
            price = _parse_price(row.get("price"))
        except ValueError as e:
            raise CatalogUnavailable(source, f"row {line}: {e}") from e

        extra = {k: v for k, v in row.items() if k not in REQUIRED_COLUMNS and k is not None and v is not None}
        items.append(Item(name=name, price=price, extra=extra))
    return items


class CatalogLoader:
    """Reads the catalog from disk on every call to :meth:`load`."""

    def __init__(self, path: Path | str):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def _read(self) -> list[Item]:
        try:
            with self._path.open(newline="", encoding="utf-8-sig") as f:
                reader = csv.DictReader(f)
                columns = reader.fieldnames or []
                missing = [c for c in REQUIRED_COLUMNS if c not in columns]
                if missing:
                    raise CatalogUnavailable(self._path, f"missing columns: {', '.join(missing)}")
                return parse_catalog(reader, source=self._path)
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise CatalogUnavailable(self._path, str(e)) from e

    async def load(self) -> list[Item]:
        """Load and parse the catalog without blocking the event loop.

        Raises:
            CatalogUnavailable: If the file is missing, unreadable or malformed
        """
        try:
            items = await asyncio.to_thread(self._read)
        except CatalogUnavailable as e:
            logger.error(str(e))
            raise
        logger.debug(f"Loaded {len(items)} items from {self._path}")
        return items
