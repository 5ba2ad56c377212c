"""String utilities."""

import re
import sys

_LEADING_INT = re.compile(r"\s*([+-]?)([0-9]+)")

# Longer digit runs are clamped to sys.maxsize before conversion
_MAX_DIGITS = len(str(sys.maxsize))


def parse_budget(value: str | None) -> int | None:
    """Parse a budget from a query string value the way ``parseInt(value, 10)`` does.

    Leading whitespace and an optional sign are accepted, then as many digits as
    are present. Anything after the digits is ignored. Magnitudes beyond
    ``sys.maxsize`` are clamped to it.

    Args:
        value: Raw query parameter, or None when absent

    Returns:
        The parsed integer, or None when the value does not start with a number
    """
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    if not match:
        return None
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    magnitude = int(digits) if len(digits) <= _MAX_DIGITS else sys.maxsize
    magnitude = min(magnitude, sys.maxsize)
    return -magnitude if sign == "-" else magnitude


def format_price(price: int, symbol: str = "¥") -> str:
    """Prefix a price with its currency symbol."""
    return f"{symbol}{price}"
