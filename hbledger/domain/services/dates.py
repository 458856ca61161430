"""Calendar arithmetic for HomeBank day offsets and budget windows."""

from collections.abc import Iterator
from datetime import date

from hbledger.domain.constants import FIRST_REPRESENTABLE_OFFSET

# date.toordinal() counts 0001-01-01 as 1; HomeBank counts 0000-01-01 as 0.
_ORDINAL_SHIFT = FIRST_REPRESENTABLE_OFFSET - 1


def date_from_offset(days: int) -> date:
    """Return the calendar date ``days`` after 0000-01-01.

    Args:
        days: HomeBank day offset.

    Returns:
        date: Matching proleptic Gregorian date.

    Raises:
        ValueError: If the offset falls in year 0 or past ``date.max``.
    """
    if days < FIRST_REPRESENTABLE_OFFSET:
        raise ValueError(f"Day offset {days} falls before 0001-01-01")
    return date.fromordinal(days - _ORDINAL_SHIFT)


def offset_from_date(value: date) -> int:
    """Return the HomeBank day offset of ``value``."""
    return value.toordinal() + _ORDINAL_SHIFT


def first_of_month(value: date) -> date:
    return value.replace(day=1)


def first_of_next_month(value: date) -> date:
    """Return the first day of the month after the one holding ``value``."""
    start = first_of_month(value)
    if start.month == 12:
        return date(start.year + 1, 1, 1)
    return date(start.year, start.month + 1, 1)


def default_window(today: date) -> tuple[date, date]:
    """Return ``[first of this month, first of next month)`` for ``today``."""
    start = first_of_month(today)
    return start, first_of_next_month(start)


def months_in_window(date_from: date, date_to: date) -> Iterator[date]:
    """Yield the first day of every month touched by ``[date_from, date_to)``.

    A month counts when any of its days lies in the window, so partial
    months are included. An empty window yields nothing.
    """
    month = first_of_month(date_from)
    while month < date_to:
        yield month
        month = first_of_next_month(month)


__all__ = [
    "date_from_offset",
    "offset_from_date",
    "first_of_month",
    "first_of_next_month",
    "default_window",
    "months_in_window",
]
