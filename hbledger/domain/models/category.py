"""Category entity and its monthly budget."""

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from hbledger.domain.constants import (
    BUDGET_FLAT_MONTH,
    BUDGET_MONTHS,
    CATEGORY_FLAG_INCOME,
)
from hbledger.domain.errors import InvalidFieldError, MissingFieldError
from hbledger.domain.services.records import (
    Attributes,
    read_decimal,
    read_id,
    read_int,
    read_text,
    to_mapping,
)


@dataclass(frozen=True)
class Category:
    """A node of the category tree.

    Attributes:
        key: Unique category id.
        name: Own name, without ancestors.
        parent: Parent category id, None for a root category.
        flags: Raw flag bits.
        budget: Budget amounts keyed by month index. Index 0 is the flat
            amount used for every month, 1..12 override single months.
    """

    key: int
    name: str
    parent: int | None = None
    flags: int = 0
    budget: Mapping[int, Decimal] = field(
        default_factory=lambda: MappingProxyType({}),
        hash=False,
    )

    @property
    def is_income(self) -> bool:
        return bool(self.flags & CATEGORY_FLAG_INCOME)

    @property
    def has_budget(self) -> bool:
        return bool(self.budget)

    def monthly_budget(self, month: int) -> Decimal | None:
        """Return the allotment for calendar ``month`` (1..12), if any."""
        if month in self.budget:
            return self.budget[month]
        return self.budget.get(BUDGET_FLAT_MONTH)

    @classmethod
    def from_attributes(cls, attributes: Attributes) -> "Category":
        """Build a category from a ``<cat>`` record.

        Raises:
            MissingFieldError: If ``key`` or ``name`` is missing.
            InvalidFieldError: If the category names itself as parent.
        """
        raw = to_mapping(attributes)
        key = read_int(raw.get("key"))
        if key is None:
            raise MissingFieldError("category", "key", raw.get("key"))
        name = read_text(raw.get("name"))
        if name is None or not name.strip():
            raise MissingFieldError("category", "name", raw.get("name"))
        parent = read_id(raw.get("parent"))
        if parent == key:
            raise InvalidFieldError("category", "parent", raw.get("parent"))

        budget: dict[int, Decimal] = {}
        for month in BUDGET_MONTHS:
            amount = read_decimal(raw.get(f"b{month}"))
            if amount:
                budget[month] = amount

        return cls(
            key=key,
            name=name,
            parent=parent,
            flags=read_int(raw.get("flags")) or 0,
            budget=MappingProxyType(budget),
        )


__all__ = ["Category"]
