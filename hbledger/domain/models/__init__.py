"""Domain models package."""

from .account import Account
from .budget import BudgetReport, BudgetRow
from .category import Category
from .currency import Currency
from .enums import (
    CurrencyKind,
    GroupStatus,
    PayMode,
    TransactionStatus,
    TransactionType,
)
from .favourite import Favourite
from .group import Group
from .payee import Payee
from .properties import DbProperties, DbVersion
from .transaction import Transaction

__all__ = [
    "Account",
    "BudgetReport",
    "BudgetRow",
    "Category",
    "Currency",
    "CurrencyKind",
    "DbProperties",
    "DbVersion",
    "Favourite",
    "Group",
    "GroupStatus",
    "PayMode",
    "Payee",
    "Transaction",
    "TransactionStatus",
    "TransactionType",
]
