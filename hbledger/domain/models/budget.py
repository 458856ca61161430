"""Result rows of the budget report."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class BudgetRow:
    """Spending against the budget of one category.

    Attributes:
        category_name: Full name of the category.
        spent: Sum of matching transaction amounts in the window.
        allotment: Budget for the window, None when no month had one.
    """

    category_name: str
    spent: Decimal
    allotment: Decimal | None

    @property
    def remaining(self) -> Decimal | None:
        """Return allotment plus spent (expenses are negative)."""
        if self.allotment is None:
            return None
        return self.allotment + self.spent


@dataclass(frozen=True)
class BudgetReport:
    """Budget rows plus window and totals for presentation."""

    rows: list[BudgetRow]
    date_from: date
    date_to: date
    total_spent: Decimal
    total_allotment: Decimal


__all__ = ["BudgetRow", "BudgetReport"]
