"""Queries over a loaded ledger store."""

from .base import Query
from .budget import BudgetQuery
from .categories import AccountQuery, CategoryQuery, GroupQuery, PayeeQuery
from .transactions import TransactionQuery

__all__ = [
    "Query",
    "AccountQuery",
    "BudgetQuery",
    "CategoryQuery",
    "GroupQuery",
    "PayeeQuery",
    "TransactionQuery",
]
