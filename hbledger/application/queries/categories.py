"""Queries over categories, groups, payees and accounts by name."""

from collections.abc import Mapping
from dataclasses import dataclass
import re

from hbledger.application.queries.base import matches, option_regex
from hbledger.domain.ledger import LedgerStore
from hbledger.domain.models import Account, Category, Group, Payee


@dataclass(frozen=True)
class CategoryQuery:
    """Select categories whose full name matches ``name``."""

    name: re.Pattern | None = None

    @classmethod
    def from_options(cls, options: Mapping[str, object]) -> "CategoryQuery":
        return cls(name=option_regex(options, "name"))

    def execute(self, ledger: LedgerStore) -> list[Category]:
        return [
            category
            for category in ledger.categories.values()
            if matches(self.name, ledger.category_full_name(category.key))
        ]


@dataclass(frozen=True)
class GroupQuery:
    """Select account groups whose name matches ``name``."""

    name: re.Pattern | None = None

    @classmethod
    def from_options(cls, options: Mapping[str, object]) -> "GroupQuery":
        return cls(name=option_regex(options, "name"))

    def execute(self, ledger: LedgerStore) -> list[Group]:
        return [
            group
            for group in ledger.groups.values()
            if matches(self.name, group.name)
        ]


@dataclass(frozen=True)
class PayeeQuery:
    """Select payees whose name matches ``name``."""

    name: re.Pattern | None = None

    @classmethod
    def from_options(cls, options: Mapping[str, object]) -> "PayeeQuery":
        return cls(name=option_regex(options, "name"))

    def execute(self, ledger: LedgerStore) -> list[Payee]:
        return [
            payee
            for payee in ledger.payees.values()
            if matches(self.name, payee.name)
        ]


@dataclass(frozen=True)
class AccountQuery:
    """Select accounts whose name matches ``name``."""

    name: re.Pattern | None = None

    @classmethod
    def from_options(cls, options: Mapping[str, object]) -> "AccountQuery":
        return cls(name=option_regex(options, "name"))

    def execute(self, ledger: LedgerStore) -> list[Account]:
        return [
            account
            for account in ledger.accounts.values()
            if matches(self.name, account.name)
        ]


__all__ = ["CategoryQuery", "GroupQuery", "PayeeQuery", "AccountQuery"]
