"""Domain package: entities, errors and the ledger store."""

from .errors import LedgerError
from .ledger import LedgerRecords, LedgerStore
from .models import (
    Account,
    BudgetRow,
    Category,
    Currency,
    Favourite,
    Group,
    Payee,
    Transaction,
)

__all__ = [
    "LedgerError",
    "LedgerRecords",
    "LedgerStore",
    "Account",
    "BudgetRow",
    "Category",
    "Currency",
    "Favourite",
    "Group",
    "Payee",
    "Transaction",
]
