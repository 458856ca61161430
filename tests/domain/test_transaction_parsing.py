"""Tests for building transactions from attribute records."""

from datetime import date
from decimal import Decimal

import pytest

from hbledger.domain.errors import (
    InvalidPayModeError,
    InvalidStatusError,
    MissingAccountError,
    MissingAmountError,
    MissingDateError,
    MissingFieldError,
    MissingPayeeError,
    MissingPayModeError,
)
from hbledger.domain.models import (
    PayMode,
    Transaction,
    TransactionStatus,
    TransactionType,
)


def _template() -> list[tuple[str, str]]:
    return [
        ("account", "1"),
        ("amount", "1"),
        ("date", "737860"),
        ("payee", "1"),
        ("paymode", "0"),
        ("st", "0"),
    ]


def _without(name: str) -> list[tuple[str, str]]:
    return [(key, value) for key, value in _template() if key != name]


def _replace(name: str, value: str) -> list[tuple[str, str]]:
    return _without(name) + [(name, value)]


def test_template_builds_income_transaction() -> None:
    """A complete record builds a fully populated transaction."""
    transaction = Transaction.from_attributes(_template())

    assert transaction == Transaction(
        date=date(2020, 3, 11),
        amount=Decimal("1"),
        account=1,
        pay_mode=PayMode.NONE,
        status=TransactionStatus.NONE,
        payee=1,
        transaction_type=TransactionType.INCOME,
    )


def test_empty_record_is_missing_account() -> None:
    """The account is checked first."""
    with pytest.raises(MissingAccountError):
        Transaction.from_attributes([])


@pytest.mark.parametrize(
    ("field", "error"),
    [
        ("account", MissingAccountError),
        ("amount", MissingAmountError),
        ("date", MissingDateError),
    ],
)
def test_missing_required_field(field: str, error: type) -> None:
    """Omitting a required field raises its own error."""
    with pytest.raises(error) as excinfo:
        Transaction.from_attributes(_without(field))

    assert isinstance(excinfo.value, MissingFieldError)
    assert excinfo.value.field == field


@pytest.mark.parametrize(
    ("field", "value", "error"),
    [
        ("account", "abc", MissingAccountError),
        ("account", "\u00b2", MissingAccountError),
        ("amount", "lots", MissingAmountError),
        ("date", "yesterday", MissingDateError),
        ("date", "12", MissingDateError),
        ("paymode", "card", MissingPayModeError),
        ("payee", "-3", MissingPayeeError),
    ],
)
def test_unparsable_required_field_counts_as_missing(
    field: str,
    value: str,
    error: type,
) -> None:
    """A required field that cannot be parsed is reported as missing."""
    with pytest.raises(error):
        Transaction.from_attributes(_replace(field, value))


def test_out_of_range_codes_are_invalid() -> None:
    """Known fields with out-of-range codes fail with invalid errors."""
    with pytest.raises(InvalidPayModeError):
        Transaction.from_attributes(_replace("paymode", "42"))
    with pytest.raises(InvalidStatusError):
        Transaction.from_attributes(_replace("st", "9"))


def test_absent_or_unparsable_status_defaults_to_none() -> None:
    """Status falls back to None instead of failing."""
    absent = Transaction.from_attributes(_without("st"))
    garbled = Transaction.from_attributes(_replace("st", "x"))

    assert absent.status is TransactionStatus.NONE
    assert garbled.status is TransactionStatus.NONE


def test_status_attribute_alias() -> None:
    """Both ``st`` and ``status`` carry the status code."""
    transaction = Transaction.from_attributes(
        _without("st") + [("status", "1")]
    )

    assert transaction.status is TransactionStatus.CLEARED


def test_optional_category_missing_or_unparsable_is_none() -> None:
    """Optional fields that cannot be parsed are simply unset."""
    missing = Transaction.from_attributes(_template())
    garbled = Transaction.from_attributes(_template() + [("category", "x")])
    present = Transaction.from_attributes(_template() + [("category", "7")])

    assert missing.category is None
    assert garbled.category is None
    assert present.category == 7


def test_amount_sign_sets_type() -> None:
    """Negative amounts are expenses, positive ones income."""
    expense = Transaction.from_attributes(_replace("amount", "-1.0"))
    income = Transaction.from_attributes(_replace("amount", "1.0"))

    assert expense.transaction_type is TransactionType.EXPENSE
    assert income.transaction_type is TransactionType.INCOME


@pytest.mark.parametrize(
    "marker",
    [("dst_account", "2"), ("kxfer", "5"), ("paymode", "5")],
)
@pytest.mark.parametrize("amount", ["1.0", "-1.0"])
def test_transfer_marker_wins_over_sign(
    marker: tuple[str, str],
    amount: str,
) -> None:
    """Transfer-marked records stay transfers whatever the sign."""
    record = [
        item for item in _replace("amount", amount) if item[0] != marker[0]
    ]
    transaction = Transaction.from_attributes(record + [marker])

    assert transaction.transaction_type is TransactionType.TRANSFER
    assert transaction.is_transfer


def test_transfer_marker_order_does_not_matter() -> None:
    """The transfer marker may come before or after the amount."""
    before = Transaction.from_attributes(
        [("kxfer", "3")] + _replace("amount", "10")
    )
    after = Transaction.from_attributes(
        _replace("amount", "10") + [("kxfer", "3")]
    )

    assert before.transaction_type is TransactionType.TRANSFER
    assert after.transaction_type is TransactionType.TRANSFER


def test_text_fields_and_tags() -> None:
    """Memo, info and tags are read; empty strings mean absent."""
    transaction = Transaction.from_attributes(
        _template()
        + [("wording", "Weekly shop"), ("info", ""), ("tags", "food,weekly")]
    )
    untagged = Transaction.from_attributes(_template() + [("tags", "")])

    assert transaction.memo == "Weekly shop"
    assert transaction.info is None
    assert transaction.tags == ("food", "weekly")
    assert untagged.tags is None


def test_unknown_attributes_are_ignored() -> None:
    """Unrecognized attribute names do not affect construction."""
    transaction = Transaction.from_attributes(
        _template() + [("scat", "1||2"), ("samt", "1||2"), ("mystery", "?")]
    )

    assert transaction == Transaction.from_attributes(_template())
