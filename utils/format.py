"""Display helpers for money and counts shown in list pages."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

Number = Union[int, float, Decimal]

NOT_AVAILABLE = "N/A"
VND_SYMBOL = "₫"


def _group_thousands(value: int) -> str:
    """Return ``value`` with dots between thousands groups (``1.234.567``)."""
    return f"{value:,}".replace(",", ".")


def _round(number: Number, places: int = 0) -> Decimal:
    quantum = Decimal(1).scaleb(-places)
    return Decimal(str(number)).quantize(quantum, rounding=ROUND_HALF_UP)


def format_currency_vnd(number: Optional[Number]) -> str:
    """Format ``number`` as Vietnamese dong, e.g. ``1.234.567 ₫``."""

    if number is None:
        return NOT_AVAILABLE
    amount = _round(number)
    sign = "-" if amount < 0 else ""
    return f"{sign}{_group_thousands(int(abs(amount)))} {VND_SYMBOL}"


def format_number_unit(number: Optional[Number]) -> str:
    """Format the magnitude of ``number`` with dot grouping.

    Up to three fractional digits are kept and written after a comma.
    """

    if number is None:
        return NOT_AVAILABLE
    amount = abs(_round(number, 3))
    whole = int(amount)
    fraction = amount - whole
    text = _group_thousands(whole)
    if fraction:
        digits = f"{fraction:.3f}"[2:].rstrip("0")
        text = f"{text},{digits}"
    return text


__all__ = ["NOT_AVAILABLE", "format_currency_vnd", "format_number_unit"]
