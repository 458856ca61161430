"""Domain services package."""

from .dates import (
    date_from_offset,
    default_window,
    first_of_month,
    first_of_next_month,
    months_in_window,
    offset_from_date,
)
from .budget import prorate_budget

__all__ = [
    "date_from_offset",
    "default_window",
    "first_of_month",
    "first_of_next_month",
    "months_in_window",
    "offset_from_date",
    "prorate_budget",
]
