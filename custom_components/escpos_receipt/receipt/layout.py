"""Fixed-width text layout helpers for receipt lines."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ..const import DEFAULT_CURRENCY_SYMBOL, DEFAULT_LINE_WIDTH

_CENTS = Decimal("0.01")
ELLIPSIS = "..."


def format_text(text: str, width: int = DEFAULT_LINE_WIDTH) -> str:
    """Truncate text with an ellipsis when it is wider than ``width``."""
    if len(text) > width:
        return text[: max(0, width - len(ELLIPSIS))] + ELLIPSIS
    return text


def center_text(text: str, width: int = DEFAULT_LINE_WIDTH) -> str:
    """Left-pad text so it sits in the middle of ``width`` columns."""
    padding = max(0, (width - len(text)) // 2)
    return " " * padding + text


def right_align(text: str, width: int = DEFAULT_LINE_WIDTH) -> str:
    """Left-pad text so it ends at column ``width``."""
    padding = max(0, width - len(text))
    return " " * padding + text


def create_line(left: str, right: str, width: int = DEFAULT_LINE_WIDTH) -> str:
    """Join two segments with padding so the right one ends at ``width``.

    At least one space always separates the segments; when they are too
    long to fit the line is allowed to overflow rather than being clamped.
    """
    padding = max(1, width - len(left) - len(right))
    return left + " " * padding + right


def divider(char: str = "=", width: int = DEFAULT_LINE_WIDTH) -> str:
    """Return a rule of ``char`` repeated ``width`` times."""
    return char * width


def format_currency(amount: float | int | Decimal, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format an amount with two decimals, rounding half away from zero.

    Floats are rounded on their shortest decimal representation, so
    ``2.345`` becomes ``2.35`` and ``1.005`` becomes ``1.01``.
    """
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    return f"{symbol}{value.quantize(_CENTS, rounding=ROUND_HALF_UP):f}"
