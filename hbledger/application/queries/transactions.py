"""Multi-filter query over ledger transactions."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
import re

from hbledger.application.queries.base import (
    matches,
    option_date,
    option_decimal,
    option_enum,
    option_int,
    option_regex,
    option_text,
)
from hbledger.domain.ledger import LedgerStore
from hbledger.domain.models import PayMode, Transaction, TransactionStatus


@dataclass(frozen=True)
class TransactionQuery:
    """Select transactions passing every supplied filter.

    Unset filters impose no constraint. Name patterns are searched in the
    resolved display names (payee name, full category name), so a
    transaction without a payee or category never matches a set pattern.

    Attributes:
        date_from: Inclusive lower date bound.
        date_to: Exclusive upper date bound.
        account: Account id.
        payee: Pattern searched in the payee name.
        category: Pattern searched in the full category name.
        status: Required status.
        pay_mode: Required pay mode.
        amount_min: Inclusive lower amount bound.
        amount_max: Inclusive upper amount bound.
        tag: Tag that must be among the transaction tags.
        memo: Pattern searched in the memo.
        info: Pattern searched in the info field.
    """

    date_from: date | None = None
    date_to: date | None = None
    account: int | None = None
    payee: re.Pattern | None = None
    category: re.Pattern | None = None
    status: TransactionStatus | None = None
    pay_mode: PayMode | None = None
    amount_min: Decimal | None = None
    amount_max: Decimal | None = None
    tag: str | None = None
    memo: re.Pattern | None = None
    info: re.Pattern | None = None

    @classmethod
    def from_options(cls, options: Mapping[str, object]) -> "TransactionQuery":
        """Build a query from textual options keyed by field name.

        Raises:
            QueryOptionError: If a value cannot be parsed.
        """
        return cls(
            date_from=option_date(options, "date_from"),
            date_to=option_date(options, "date_to"),
            account=option_int(options, "account"),
            payee=option_regex(options, "payee"),
            category=option_regex(options, "category"),
            status=option_enum(options, "status", TransactionStatus),
            pay_mode=option_enum(options, "pay_mode", PayMode),
            amount_min=option_decimal(options, "amount_min"),
            amount_max=option_decimal(options, "amount_max"),
            tag=option_text(options, "tag"),
            memo=option_regex(options, "memo"),
            info=option_regex(options, "info"),
        )

    def accepts(self, transaction: Transaction, ledger: LedgerStore) -> bool:
        """Return True when ``transaction`` passes every set filter."""
        if self.date_from is not None and transaction.date < self.date_from:
            return False
        if self.date_to is not None and transaction.date >= self.date_to:
            return False
        if self.account is not None and transaction.account != self.account:
            return False
        if self.status is not None and transaction.status is not self.status:
            return False
        if (
            self.pay_mode is not None
            and transaction.pay_mode is not self.pay_mode
        ):
            return False
        if self.amount_min is not None and transaction.amount < self.amount_min:
            return False
        if self.amount_max is not None and transaction.amount > self.amount_max:
            return False
        if self.tag is not None and self.tag not in (transaction.tags or ()):
            return False
        if not matches(self.memo, transaction.memo):
            return False
        if not matches(self.info, transaction.info):
            return False
        if not matches(self.payee, ledger.payee_name(transaction.payee)):
            return False
        if self.category is not None and not matches(
            self.category,
            ledger.category_full_name(transaction.category),
        ):
            return False
        return True

    def execute(self, ledger: LedgerStore) -> list[Transaction]:
        """Return matching transactions in ledger order."""
        return [
            transaction
            for transaction in ledger.transactions
            if self.accepts(transaction, ledger)
        ]


__all__ = ["TransactionQuery"]
