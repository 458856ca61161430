"""Tests for prorating monthly budgets over date windows."""

from datetime import date
from decimal import Decimal

from hbledger.domain.models import Category
from hbledger.domain.services.budget import prorate_budget


def _category(**budget: str) -> Category:
    attributes = [("key", "1"), ("name", "Groceries")]
    attributes += [(month, amount) for month, amount in budget.items()]
    return Category.from_attributes(attributes)


def test_single_month_window_uses_monthly_amount() -> None:
    category = _category(b0="200")

    assert prorate_budget(
        category, date(2020, 3, 1), date(2020, 4, 1)
    ) == Decimal("200")


def test_partial_months_count_in_full() -> None:
    """Every touched month contributes its whole allotment."""
    category = _category(b0="200")

    assert prorate_budget(
        category, date(2020, 1, 15), date(2020, 3, 2)
    ) == Decimal("600")


def test_months_without_entry_contribute_nothing() -> None:
    """Month overrides apply; months with no entry are skipped."""
    category = _category(b1="50", b3="60")

    assert prorate_budget(
        category, date(2020, 1, 1), date(2020, 4, 1)
    ) == Decimal("110")
    assert prorate_budget(category, date(2020, 2, 1), date(2020, 3, 1)) is None


def test_window_across_year_end() -> None:
    category = _category(b0="10", b1="30")

    assert prorate_budget(
        category, date(2020, 12, 1), date(2021, 2, 1)
    ) == Decimal("40")


def test_empty_window_has_no_allotment() -> None:
    category = _category(b0="200")

    assert prorate_budget(category, date(2020, 3, 1), date(2020, 3, 1)) is None
