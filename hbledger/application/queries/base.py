"""Query contract and helpers for parsing textual filter options."""

from collections.abc import Mapping
from datetime import date
from decimal import Decimal
import re
from typing import Protocol, TypeVar

from hbledger.domain.errors import QueryOptionError
from hbledger.domain.ledger import LedgerStore
from hbledger.utils.decimal_utils import parse_decimal

T_co = TypeVar("T_co", covariant=True)


class Query(Protocol[T_co]):
    """A query turns a ledger store into an ordered list of items.

    Implementations are immutable value objects and never modify the
    store they read.
    """

    def execute(self, ledger: LedgerStore) -> list[T_co]:
        """Return the items of ``ledger`` matching this query."""


def matches(pattern: re.Pattern | None, value: str | None) -> bool:
    """Return True when ``pattern`` is unset or found in ``value``.

    A set pattern never matches a missing value.
    """
    if pattern is None:
        return True
    if value is None:
        return False
    return pattern.search(value) is not None


def exact_pattern(name: str) -> re.Pattern:
    """Return a pattern matching ``name`` and nothing else."""
    return re.compile(rf"\A{re.escape(name)}\Z")


def option_text(options: Mapping[str, object], key: str) -> str | None:
    value = options.get(key)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def option_regex(options: Mapping[str, object], key: str) -> re.Pattern | None:
    text = option_text(options, key)
    if text is None:
        return None
    try:
        return re.compile(text)
    except re.error as exc:
        raise QueryOptionError(key, text, str(exc)) from exc


def option_date(options: Mapping[str, object], key: str) -> date | None:
    value = options.get(key)
    if isinstance(value, date):
        return value
    text = option_text(options, key)
    if text is None:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        raise QueryOptionError(key, text, "expected YYYY-MM-DD") from exc


def option_int(options: Mapping[str, object], key: str) -> int | None:
    text = option_text(options, key)
    if text is None:
        return None
    if not (text.isascii() and text.isdigit()):
        raise QueryOptionError(key, text, "expected a positive integer")
    return int(text)


def option_decimal(options: Mapping[str, object], key: str) -> Decimal | None:
    text = option_text(options, key)
    if text is None:
        return None
    value = parse_decimal(text)
    if value is None:
        raise QueryOptionError(key, text, "expected a number")
    return value


def option_enum(options: Mapping[str, object], key: str, enum_cls):
    value = options.get(key)
    if isinstance(value, enum_cls):
        return value
    text = option_text(options, key)
    if text is None:
        return None
    try:
        return enum_cls.from_name(text)
    except ValueError as exc:
        raise QueryOptionError(key, text, str(exc)) from exc


__all__ = [
    "Query",
    "matches",
    "exact_pattern",
    "option_text",
    "option_regex",
    "option_date",
    "option_int",
    "option_decimal",
    "option_enum",
]
