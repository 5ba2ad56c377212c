"""HTML rendering of gacha results."""

from html import escape
from typing import Sequence

from gacha.models import Item
from gacha.utils.strings import format_price


def render_selection(items: Sequence[Item], currency_symbol: str = "¥") -> str:
    """Render picked items as an HTML fragment.

    Each item becomes a ``product`` element inside a single ``result`` container,
    in draw order. Item names are escaped.
    """
    parts = ["<div id='result' class='result'>"]
    for item in items:
        price = format_price(item.price, currency_symbol)
        parts.append(f"<div class='product'>{escape(item.name)} {price}</div>")
    parts.append("</div>")
    return "".join(parts)
