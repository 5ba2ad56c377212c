"""Tests for gacha API endpoints."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from gacha.catalog import CatalogUnavailable
from gacha.models import Item

from conftest import SequenceRandom


def _make_deps(catalog, max_draws=10000):
    """Build mocks so the gacha routes run without touching disk."""
    mock_deps = MagicMock()
    mock_deps.loader.load = AsyncMock(return_value=catalog)
    mock_deps.rng = SequenceRandom([0])
    mock_deps.settings.max_draws = max_draws
    mock_deps.settings.currency_symbol = "¥"
    return mock_deps


@pytest.mark.asyncio
async def test_gacha_json_reports_accounting():
    """GET /api/gacha returns picks with budget, spent and remaining."""
    from gacha.api.routers.gacha import gacha_json

    mock_deps = _make_deps([Item("A", 100, extra={"category": "x"})])

    result = await gacha_json(mock_deps, number="250")

    assert result == {
        "budget": 250,
        "spent": 200,
        "remaining": 50,
        "items": [
            {"category": "x", "name": "A", "price": 100},
            {"category": "x", "name": "A", "price": 100},
        ],
    }
    mock_deps.loader.load.assert_awaited_once()


@pytest.mark.asyncio
async def test_gacha_json_non_numeric_budget_is_empty():
    """A budget that does not parse buys nothing but still succeeds."""
    from gacha.api.routers.gacha import gacha_json

    mock_deps = _make_deps([Item("A", 100)])

    result = await gacha_json(mock_deps, number="lots")

    assert result["items"] == []
    assert result["budget"] == 0
    assert mock_deps.rng.calls == []


@pytest.mark.asyncio
async def test_gacha_passes_draw_cap():
    """The configured draw cap bounds the number of picks."""
    from gacha.api.routers.gacha import gacha_json

    mock_deps = _make_deps([Item("A", 1)], max_draws=3)

    result = await gacha_json(mock_deps, number="100")

    assert len(result["items"]) == 3
    assert result["remaining"] == 97


@pytest.mark.asyncio
async def test_gacha_html_renders_products():
    """GET /gacha renders each pick as a product element."""
    from gacha.api.routers.gacha import gacha_html

    mock_deps = _make_deps([Item("Tea", 200)])

    response = await gacha_html(mock_deps, number="450")

    assert response.body.decode() == (
        "<div id='result' class='result'>"
        "<div class='product'>Tea ¥200</div>"
        "<div class='product'>Tea ¥200</div>"
        "</div>"
    )


@pytest.mark.asyncio
async def test_gacha_propagates_catalog_failure():
    """Catalog errors are not swallowed by the route."""
    from gacha.api.routers.gacha import gacha_html

    mock_deps = _make_deps([])
    mock_deps.loader.load = AsyncMock(side_effect=CatalogUnavailable("menu.csv", "missing"))

    with pytest.raises(CatalogUnavailable):
        await gacha_html(mock_deps, number="100")
