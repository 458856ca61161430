"""Closed code sets used by HomeBank records."""

from enum import Enum, IntEnum


class _CodedEnum(IntEnum):
    """IntEnum with helpers for record codes and textual filters."""

    @classmethod
    def from_code(cls, code: int):
        """Return the member for a numeric record code.

        Raises:
            ValueError: If the code is outside the closed range.
        """
        try:
            return cls(code)
        except ValueError:
            raise ValueError(f"{code} is not a valid {cls.__name__}") from None

    @classmethod
    def from_name(cls, text: str):
        """Return the member named by ``text`` (symbolic name or code).

        Names compare case-insensitively and ignore ``_``/``-``/spaces.
        """
        candidate = text.strip()
        if candidate.isascii() and candidate.isdigit():
            return cls.from_code(int(candidate))
        wanted = _squash(candidate)
        for member in cls:
            if _squash(member.name) == wanted or _squash(member.label) == wanted:
                return member
        raise ValueError(f"{text!r} is not a valid {cls.__name__}")

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


def _squash(value: str) -> str:
    return "".join(ch for ch in value.lower() if ch.isalnum())


class PayMode(_CodedEnum):
    NONE = 0
    CREDIT_CARD = 1
    CHECK = 2
    CASH = 3
    TRANSFER = 4
    INTERNAL_TRANSFER = 5
    DEBIT_CARD = 6
    STANDING_ORDER = 7
    ELECTRONIC_PAYMENT = 8
    DEPOSIT = 9
    FINANCIAL_INSTITUTION_FEE = 10
    DIRECT_DEBIT = 11


class TransactionStatus(_CodedEnum):
    NONE = 0
    CLEARED = 1
    RECONCILED = 2
    REMIND = 3
    VOID = 4


class TransactionType(Enum):
    """Direction of a transaction, derived from its amount."""

    EXPENSE = "expense"
    INCOME = "income"
    TRANSFER = "transfer"

    @classmethod
    def from_amount(cls, amount, is_transfer: bool = False) -> "TransactionType":
        """Derive the type: transfers stay transfers, else sign decides."""
        if is_transfer:
            return cls.TRANSFER
        if amount > 0:
            return cls.INCOME
        return cls.EXPENSE

    @property
    def label(self) -> str:
        return self.value.title()


class GroupStatus(Enum):
    ACTIVE = "active"
    ARCHIVED = "archived"

    @property
    def label(self) -> str:
        return self.value.title()


class CurrencyKind(Enum):
    """Whether a currency is the ledger's base currency."""

    BASE = "base"
    FOREIGN = "foreign"

    @property
    def label(self) -> str:
        return self.value.title()


__all__ = [
    "PayMode",
    "TransactionStatus",
    "TransactionType",
    "GroupStatus",
    "CurrencyKind",
]
