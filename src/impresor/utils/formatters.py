from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import TypeVar

T = TypeVar("T")


def to_decimal(value: object) -> Decimal:
    """Convert a parser value to Decimal; None, empty and non-numeric values are zero."""
    if value is None or value == "":
        return Decimal(0)
    try:
        d = Decimal(str(value).strip())
    except InvalidOperation:
        return Decimal(0)
    if not d.is_finite():
        return Decimal(0)
    return d


def format_currency(value: str | int | float | Decimal | None) -> str:
    """Format a monetary value as X,XXX.XX.

    None, empty and non-numeric values are formatted as zero.
    """
    return f"{to_decimal(value):,.2f}"


def break_every_n(value: str | None, n: int) -> str:
    """Insert a line break every *n* characters (for seals and chain strings)."""
    if not value:
        return ""
    if len(value) <= n:
        return value
    return "\n".join(value[i : i + n] for i in range(0, len(value), n))


def or_default(value: T | None, fallback: T | str = "") -> T | str:
    """Return *value*, or *fallback* when it is None or an empty string."""
    if value is None or value == "":
        return fallback
    return value
