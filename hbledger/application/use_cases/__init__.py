"""Application use cases package."""

from .get_budget_report import GetBudgetReportUseCase
from .load_ledger import LoadLedgerUseCase
from .search_transactions import (
    SearchTransactionsUseCase,
    TransactionSearchResult,
    TransactionView,
)

__all__ = [
    "GetBudgetReportUseCase",
    "LoadLedgerUseCase",
    "SearchTransactionsUseCase",
    "TransactionSearchResult",
    "TransactionView",
]
