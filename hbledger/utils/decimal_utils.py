"""Helpers for Decimal normalization."""

from collections.abc import Iterable
from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from records or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def parse_decimal(raw: str | None) -> Decimal | None:
    """Parse a record string into a finite Decimal.

    Args:
        raw: Attribute text such as ``"-50.23"``.

    Returns:
        Decimal | None: Parsed value, or None when the text is not a number.
    """
    if raw is None:
        return None
    try:
        value = Decimal(raw.strip())
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


def sum_decimals(values: Iterable) -> Decimal:
    """Return the plain arithmetic sum of the given amounts."""
    return sum((coerce_decimal(value) for value in values), start=Decimal("0"))


__all__ = ["coerce_decimal", "parse_decimal", "sum_decimals"]
