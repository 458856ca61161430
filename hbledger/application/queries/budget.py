"""Budget query: allotment versus actual spending per category."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
import re

from hbledger.application.queries.base import (
    exact_pattern,
    matches,
    option_date,
    option_regex,
)
from hbledger.application.queries.transactions import TransactionQuery
from hbledger.domain.ledger import LedgerStore
from hbledger.domain.models import BudgetRow, Category
from hbledger.domain.services.budget import prorate_budget
from hbledger.domain.services.dates import default_window
from hbledger.utils.decimal_utils import sum_decimals


@dataclass(frozen=True)
class BudgetQuery:
    """Compare budgeted and spent amounts over ``[date_from, date_to)``.

    Only categories with at least one budget entry are reported. Rows are
    sorted by full category name.
    """

    date_from: date
    date_to: date
    name: re.Pattern | None = None

    @classmethod
    def create(
        cls,
        name: re.Pattern | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
        today: date | None = None,
    ) -> "BudgetQuery":
        """Build a query, filling missing bounds from the current month.

        Args:
            name: Pattern searched in full category names.
            date_from: Inclusive window start.
            date_to: Exclusive window end.
            today: Reference date for the defaults; the system date when
                omitted.
        """
        default_from, default_to = default_window(today or date.today())
        return cls(
            date_from=date_from or default_from,
            date_to=date_to or default_to,
            name=name,
        )

    @classmethod
    def from_options(
        cls,
        options: Mapping[str, object],
        today: date | None = None,
    ) -> "BudgetQuery":
        return cls.create(
            name=option_regex(options, "name"),
            date_from=option_date(options, "date_from"),
            date_to=option_date(options, "date_to"),
            today=today,
        )

    def budgeted_categories(self, ledger: LedgerStore) -> list[Category]:
        """Return matching categories with a budget, sorted by full name."""
        selected = [
            category
            for category in ledger.categories.values()
            if category.has_budget
            and matches(self.name, ledger.category_full_name(category.key))
        ]
        return sorted(
            selected,
            key=lambda category: ledger.category_full_name(category.key),
        )

    def execute(self, ledger: LedgerStore) -> list[BudgetRow]:
        rows: list[BudgetRow] = []
        for category in self.budgeted_categories(ledger):
            full_name = ledger.category_full_name(category.key)
            transactions = TransactionQuery(
                date_from=self.date_from,
                date_to=self.date_to,
                category=exact_pattern(full_name),
            ).execute(ledger)
            rows.append(
                BudgetRow(
                    category_name=full_name,
                    spent=sum_decimals(t.amount for t in transactions),
                    allotment=prorate_budget(
                        category,
                        self.date_from,
                        self.date_to,
                    ),
                )
            )
        return rows


__all__ = ["BudgetQuery"]
