"""Parsing of values rendered as text by the store."""

import re
from typing import Iterable, List

_CURRENCY_PATTERN = re.compile(r"\$([0-9.]+)")


def parse_currency(text: str) -> float:
    """Extract the dollar amount from a rendered label.

    Works for bare prices (``"$29.99"``) and summary lines
    (``"Item total: $39.98"``).

    Args:
        text: Rendered label text

    Returns:
        The amount as a float, or 0.0 when the text holds no amount
    """
    match = _CURRENCY_PATTERN.search(text or "")
    if not match:
        return 0.0
    try:
        return float(match.group(1))
    except ValueError:
        # e.g. "$1.2.3"
        return 0.0


def parse_currencies(texts: Iterable[str]) -> List[float]:
    """Parse a list of rendered prices."""
    return [parse_currency(text) for text in texts]


def parse_count(text: str) -> int:
    """Parse a counter badge such as the cart indicator.

    Raises:
        ValueError: If the badge text is not an integer
    """
    return int(text.strip())
