"""In-memory, read-only store of every entity in a HomeBank file.

The store is built once from parsed attribute records and never changes
afterwards. Entities refer to each other by id; resolving a reference is a
mapping lookup and an unknown id resolves to None instead of failing.
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeVar

from hbledger.domain.constants import CATEGORY_SEPARATOR
from hbledger.domain.errors import CategoryCycleError, InvalidFieldError
from hbledger.domain.models import (
    Account,
    Category,
    Currency,
    CurrencyKind,
    DbProperties,
    DbVersion,
    Favourite,
    Group,
    Payee,
    Transaction,
)
from hbledger.domain.services.records import Attributes

T = TypeVar("T")

# Element names of the HomeBank XHB format.
PROPERTIES = "properties"
CURRENCY = "cur"
GROUP = "grp"
ACCOUNT = "account"
PAYEE = "pay"
CATEGORY = "cat"
FAVOURITE = "fav"
TRANSACTION = "ope"


@dataclass(frozen=True)
class LedgerRecords:
    """Raw attribute records grouped by element name.

    Attributes:
        root: Attributes of the root element.
        elements: Attribute lists per element name, in file order.
    """

    root: list[tuple[str, str]] = field(default_factory=list)
    elements: dict[str, list[list[tuple[str, str]]]] = field(
        default_factory=dict
    )

    def of(self, element: str) -> list[list[tuple[str, str]]]:
        return self.elements.get(element, [])


def _index(
    entity_name: str,
    records: Iterable[Attributes],
    build: Callable[[Attributes], T],
) -> dict[int, T]:
    """Index entities by key; a repeated key makes the file corrupt."""
    indexed: dict[int, T] = {}
    for attributes in records:
        entity = build(attributes)
        if entity.key in indexed:
            raise InvalidFieldError(entity_name, "key", str(entity.key))
        indexed[entity.key] = entity
    return indexed


class LedgerStore:
    """Id-indexed entities of one ledger file."""

    def __init__(
        self,
        *,
        accounts: Mapping[int, Account] | None = None,
        categories: Mapping[int, Category] | None = None,
        currencies: Mapping[int, Currency] | None = None,
        groups: Mapping[int, Group] | None = None,
        payees: Mapping[int, Payee] | None = None,
        favourites: Mapping[int, Favourite] | None = None,
        transactions: Iterable[Transaction] = (),
        properties: DbProperties | None = None,
        version: DbVersion | None = None,
    ) -> None:
        self._accounts = MappingProxyType(dict(accounts or {}))
        self._categories = MappingProxyType(dict(categories or {}))
        self._currencies = MappingProxyType(dict(currencies or {}))
        self._groups = MappingProxyType(dict(groups or {}))
        self._payees = MappingProxyType(dict(payees or {}))
        self._favourites = MappingProxyType(dict(favourites or {}))
        self._transactions = tuple(transactions)
        self._properties = properties or DbProperties()
        self._version = version or DbVersion()

    @classmethod
    def from_records(cls, records: LedgerRecords) -> "LedgerStore":
        """Build a store from parsed records.

        The first record that fails entity construction aborts the whole
        build, and so does a cyclic category parent chain.

        Raises:
            EntityError: If any record is missing or has invalid fields.
            CategoryCycleError: If category parents form a loop.
        """
        properties_records = records.of(PROPERTIES)
        properties = (
            DbProperties.from_attributes(properties_records[0])
            if properties_records
            else DbProperties()
        )
        store = cls(
            accounts=_index(
                "account", records.of(ACCOUNT), Account.from_attributes
            ),
            categories=_index(
                "category", records.of(CATEGORY), Category.from_attributes
            ),
            currencies=_index(
                "currency", records.of(CURRENCY), Currency.from_attributes
            ),
            groups=_index("group", records.of(GROUP), Group.from_attributes),
            payees=_index("payee", records.of(PAYEE), Payee.from_attributes),
            favourites=_index(
                "favourite", records.of(FAVOURITE), Favourite.from_attributes
            ),
            transactions=[
                Transaction.from_attributes(attributes)
                for attributes in records.of(TRANSACTION)
            ],
            properties=properties,
            version=DbVersion.from_attributes(records.root),
        )
        store.validate_category_tree()
        return store

    @property
    def accounts(self) -> Mapping[int, Account]:
        return self._accounts

    @property
    def categories(self) -> Mapping[int, Category]:
        return self._categories

    @property
    def currencies(self) -> Mapping[int, Currency]:
        return self._currencies

    @property
    def groups(self) -> Mapping[int, Group]:
        return self._groups

    @property
    def payees(self) -> Mapping[int, Payee]:
        return self._payees

    @property
    def favourites(self) -> Mapping[int, Favourite]:
        return self._favourites

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return self._transactions

    @property
    def properties(self) -> DbProperties:
        return self._properties

    @property
    def version(self) -> DbVersion:
        return self._version

    def account_name(self, account_id: int | None) -> str | None:
        account = self._accounts.get(account_id)
        return account.name if account else None

    def payee_name(self, payee_id: int | None) -> str | None:
        payee = self._payees.get(payee_id)
        return payee.name if payee else None

    def group_name(self, group_id: int | None) -> str | None:
        group = self._groups.get(group_id)
        return group.name if group else None

    def category_full_name(self, category_id: int | None) -> str | None:
        """Return the category name prefixed by its ancestors, root first.

        Args:
            category_id: Id of the category to resolve.

        Returns:
            str | None: Names joined by the category separator, or None
            when the id is unknown.

        Raises:
            CategoryCycleError: If the parent chain loops.
        """
        if category_id not in self._categories:
            return None
        names = [
            category.name for category in self._ancestry(category_id)
        ]
        return CATEGORY_SEPARATOR.join(reversed(names))

    def category_children(self, category_id: int) -> list[Category]:
        return [
            category
            for category in self._categories.values()
            if category.parent == category_id
        ]

    def currency_of_account(self, account_id: int | None) -> Currency | None:
        account = self._accounts.get(account_id)
        if account is None:
            return None
        return self._currencies.get(account.currency)

    def currency_kind(self, currency_id: int | None) -> CurrencyKind | None:
        """Return whether the currency is the ledger's base currency."""
        if currency_id not in self._currencies:
            return None
        if currency_id == self._properties.base_currency:
            return CurrencyKind.BASE
        return CurrencyKind.FOREIGN

    def validate_category_tree(self) -> None:
        """Walk every category chain once so cycles fail eagerly."""
        for category_id in self._categories:
            for _ in self._ancestry(category_id):
                pass

    def _ancestry(self, category_id: int):
        """Yield the category and its ancestors, leaf first.

        A parent id missing from the mapping ends the chain.
        """
        visited: list[int] = []
        current = self._categories.get(category_id)
        while current is not None:
            if current.key in visited:
                raise CategoryCycleError(category_id, visited + [current.key])
            visited.append(current.key)
            yield current
            if current.parent is None:
                return
            current = self._categories.get(current.parent)

    def __repr__(self) -> str:
        return (
            f"LedgerStore(accounts={len(self._accounts)}, "
            f"categories={len(self._categories)}, "
            f"payees={len(self._payees)}, "
            f"transactions={len(self._transactions)})"
        )


__all__ = [
    "LedgerRecords",
    "LedgerStore",
    "PROPERTIES",
    "CURRENCY",
    "GROUP",
    "ACCOUNT",
    "PAYEE",
    "CATEGORY",
    "FAVOURITE",
    "TRANSACTION",
]
