"""Use case to list transactions with their references resolved."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from hbledger.application.queries.transactions import TransactionQuery
from hbledger.domain.ledger import LedgerStore
from hbledger.domain.models import (
    PayMode,
    Transaction,
    TransactionStatus,
    TransactionType,
)
from hbledger.infrastructure.logging.logger import get_app_logger
from hbledger.utils.decimal_utils import sum_decimals


@dataclass(frozen=True)
class TransactionView:
    """Transaction with display names in place of ids."""

    date: date
    amount: Decimal
    account_name: str | None
    payee_name: str | None
    category_name: str | None
    memo: str | None
    info: str | None
    status: TransactionStatus
    pay_mode: PayMode
    transaction_type: TransactionType
    tags: tuple[str, ...] | None

    @classmethod
    def from_transaction(
        cls,
        transaction: Transaction,
        ledger: LedgerStore,
    ) -> "TransactionView":
        return cls(
            date=transaction.date,
            amount=transaction.amount,
            account_name=ledger.account_name(transaction.account),
            payee_name=ledger.payee_name(transaction.payee),
            category_name=ledger.category_full_name(transaction.category),
            memo=transaction.memo,
            info=transaction.info,
            status=transaction.status,
            pay_mode=transaction.pay_mode,
            transaction_type=transaction.transaction_type,
            tags=transaction.tags,
        )


@dataclass(frozen=True)
class TransactionSearchResult:
    """Matching transactions and their summed amount."""

    transactions: list[TransactionView]
    total: Decimal


class SearchTransactionsUseCase:
    """Run a transaction query and resolve display names."""

    def __init__(self, ledger: LedgerStore, logger=None) -> None:
        self._ledger = ledger
        self._logger = logger or get_app_logger()

    def execute(self, query: TransactionQuery) -> TransactionSearchResult:
        matched = query.execute(self._ledger)
        self._logger.info(
            f"Transaction query matched {len(matched)} of "
            f"{len(self._ledger.transactions)} transactions"
        )
        views = [
            TransactionView.from_transaction(transaction, self._ledger)
            for transaction in matched
        ]
        return TransactionSearchResult(
            transactions=views,
            total=sum_decimals(view.amount for view in views),
        )


__all__ = [
    "SearchTransactionsUseCase",
    "TransactionSearchResult",
    "TransactionView",
]
