"""Gacha routes: draw items for a budget and return them as HTML or JSON."""

import logging
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from typing_extensions import Annotated

from gacha.allocator import draw
from gacha.api.dependencies import GachaDependencies, get_gacha_deps
from gacha.models import GachaResult
from gacha.render import render_selection
from gacha.utils.strings import parse_budget

logger = logging.getLogger(__name__)

router = APIRouter(tags=["gacha"])
api_router = APIRouter(prefix="/gacha", tags=["gacha"])


async def _run(deps: GachaDependencies, number: str | None) -> GachaResult:
    budget = parse_budget(number)
    catalog = await deps.loader.load()
    result = draw(catalog, budget, rng=deps.rng, max_draws=deps.settings.max_draws)
    logger.info(f"Gacha budget={number!r}: {len(result.items)} items, {result.spent} spent")
    return result


@router.get("/gacha", response_class=HTMLResponse)
async def gacha_html(
    deps: Annotated[GachaDependencies, Depends(get_gacha_deps)],
    number: str | None = None,
) -> HTMLResponse:
    """Spin the gacha and return the picked items as an HTML fragment."""
    result = await _run(deps, number)
    return HTMLResponse(render_selection(result.items, deps.settings.currency_symbol))


@api_router.get("")
async def gacha_json(
    deps: Annotated[GachaDependencies, Depends(get_gacha_deps)],
    number: str | None = None,
) -> dict[str, Any]:
    """Spin the gacha and return the picked items with the budget accounting."""
    result = await _run(deps, number)
    return {
        "budget": result.budget,
        "spent": result.spent,
        "remaining": result.remaining,
        "items": [item.to_dict() for item in result.items],
    }
