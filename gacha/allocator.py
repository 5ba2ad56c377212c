"""
Allocator - Greedy random selection of catalog items within a budget.

Usage:
    from gacha.allocator import allocate, draw

    items = allocate(catalog, 500)           # list[Item]
    result = draw(catalog, 500, rng=rng)     # GachaResult with spent/remaining

Each round picks one item uniformly at random from the items whose price fits
the remaining budget, until nothing fits. Items are drawn with replacement, so
the same entry can appear more than once.
"""

from __future__ import annotations

import logging
import math
import random
import sys
from typing import Optional, Protocol, Sequence, Union

from gacha.models import GachaResult, Item

logger = logging.getLogger(__name__)

Budget = Optional[Union[int, float]]


class RandomSource(Protocol):
    """Uniform draw over ``range(n)``."""

    def __call__(self, n: int) -> int: ...


def _usable_budget(budget: Budget) -> int:
    """Return the budget as an int, or 0 if it carries no purchasing power."""
    if budget is None:
        return 0
    if isinstance(budget, float):
        if math.isnan(budget) or budget <= 0:
            return 0
        # Unbounded budgets are clamped; max_draws bounds the work
        if math.isinf(budget):
            return sys.maxsize
        return int(budget)
    return budget if budget > 0 else 0


def allocate(
    catalog: Sequence[Item],
    budget: Budget,
    rng: Optional[RandomSource] = None,
    max_draws: Optional[int] = None,
) -> list[Item]:
    """Pick random affordable items until none fits the remaining budget.

    Args:
        catalog: Items available for every draw (never modified)
        budget: Spending limit; None, NaN and non-positive values buy nothing
        rng: Random source, ``rng(n)`` returns an index in ``[0, n)``.
            Defaults to ``random.randrange``.
        max_draws: Optional upper bound on the number of draws

    Returns:
        Picked items in draw order
    """
    rng = rng or random.randrange
    remaining = _usable_budget(budget)
    results: list[Item] = []

    while remaining > 0:
        if max_draws is not None and len(results) >= max_draws:
            logger.warning(f"Draw cap of {max_draws} reached with {remaining} left")
            break

        affordable = [item for item in catalog if item.price <= remaining]
        if not affordable:
            break

        # Free items alone can never reduce the remaining budget
        if all(item.price <= 0 for item in affordable):
            logger.warning(f"Only free items affordable with {remaining} left, stopping")
            break

        picked = affordable[rng(len(affordable))]
        results.append(picked)
        remaining -= picked.price

    logger.debug(f"Allocated {len(results)} items from {len(catalog)}, {remaining} left")
    return results


def draw(
    catalog: Sequence[Item],
    budget: Budget,
    rng: Optional[RandomSource] = None,
    max_draws: Optional[int] = None,
) -> GachaResult:
    """Run :func:`allocate` and account for what was spent."""
    usable = _usable_budget(budget)
    items = allocate(catalog, usable, rng=rng, max_draws=max_draws)
    spent = sum(item.price for item in items)
    return GachaResult(items=items, budget=usable, spent=spent, remaining=usable - spent)
