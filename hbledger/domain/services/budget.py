"""Budget proration over date windows."""

from datetime import date
from decimal import Decimal

from hbledger.domain.models.category import Category
from hbledger.domain.services.dates import months_in_window


def prorate_budget(
    category: Category,
    date_from: date,
    date_to: date,
) -> Decimal | None:
    """Return the budget of ``category`` for ``[date_from, date_to)``.

    Every calendar month the window touches contributes its full monthly
    allotment; there is no day-level proration. Months without an entry
    contribute nothing.

    Args:
        category: Category holding the monthly budget.
        date_from: Inclusive window start.
        date_to: Exclusive window end.

    Returns:
        Decimal | None: Summed allotment, or None when no spanned month
        has a budget entry.
    """
    total: Decimal | None = None
    for month_start in months_in_window(date_from, date_to):
        amount = category.monthly_budget(month_start.month)
        if amount is None:
            continue
        total = amount if total is None else total + amount
    return total


__all__ = ["prorate_budget"]
