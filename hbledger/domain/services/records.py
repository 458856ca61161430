"""Helpers for reading typed values out of raw attribute records.

A record is the list of ``(name, value)`` pairs carried by one XML element.
Readers return None when the value is absent or cannot be parsed; entity
constructors decide whether that means "missing" or "not set".
"""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from hbledger.domain.services.dates import date_from_offset
from hbledger.utils.decimal_utils import parse_decimal

Attributes = Iterable[tuple[str, str]]


def to_mapping(attributes: Attributes) -> dict[str, str]:
    """Collapse attribute pairs into a dict; later duplicates win."""
    return {name: value for name, value in attributes}


def read_int(raw: str | None) -> int | None:
    """Parse a non-negative integer such as an id or a code."""
    if raw is None:
        return None
    text = raw.strip()
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)


def read_id(raw: str | None) -> int | None:
    """Parse a foreign key, where 0 means "no reference"."""
    value = read_int(raw)
    if not value:
        return None
    return value


def read_decimal(raw: str | None) -> Decimal | None:
    return parse_decimal(raw)


def read_date(raw: str | None) -> date | None:
    offset = read_int(raw)
    if offset is None:
        return None
    try:
        return date_from_offset(offset)
    except (ValueError, OverflowError):
        return None


def read_text(raw: str | None) -> str | None:
    """Return the text, treating an empty string as absent."""
    if raw is None or raw == "":
        return None
    return raw


def read_tags(raw: str | None) -> tuple[str, ...] | None:
    """Split a comma separated tag list, keeping order."""
    if raw is None or raw == "":
        return None
    return tuple(raw.split(","))


__all__ = [
    "Attributes",
    "to_mapping",
    "read_int",
    "read_id",
    "read_decimal",
    "read_date",
    "read_text",
    "read_tags",
]
