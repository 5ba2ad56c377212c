"""Utility helpers for the gacha package."""

from gacha.utils.strings import format_price, parse_budget

__all__ = ["format_price", "parse_budget"]
