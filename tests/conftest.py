"""Pytest configuration and fixtures."""

import itertools

import pytest

from gacha.models import Item


class SequenceRandom:
    """Deterministic random source replaying fixed picks.

    Each pick is reduced modulo ``n`` so it always lands in range.
    """

    def __init__(self, picks):
        self._picks = itertools.cycle(picks)
        self.calls: list[int] = []

    def __call__(self, n: int) -> int:
        self.calls.append(n)
        return next(self._picks) % n


@pytest.fixture
def first_pick():
    """Random source that always picks the first affordable item."""
    return SequenceRandom([0])


@pytest.fixture
def menu():
    """A small catalog with a spread of prices."""
    return [
        Item(name="Beef bowl", price=480, extra={"category": "rice"}),
        Item(name="Miso soup", price=80, extra={"category": "side"}),
        Item(name="Pickles", price=60, extra={"category": "side"}),
        Item(name="Draft beer", price=450, extra={"category": "drink"}),
    ]


@pytest.fixture
def catalog_file(tmp_path):
    """Write a CSV catalog and return its path."""
    path = tmp_path / "menu.csv"
    path.write_text(
        "name,price,category\n"
        "Beef bowl,480,rice\n"
        "Miso soup,80,side\n"
        "Pickles,60,side\n",
        encoding="utf-8",
    )
    return path
