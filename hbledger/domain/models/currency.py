"""Currency entity."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from hbledger.domain.errors import InvalidFieldError, MissingFieldError
from hbledger.domain.services.records import (
    Attributes,
    read_date,
    read_decimal,
    read_int,
    read_text,
    to_mapping,
)


@dataclass(frozen=True)
class Currency:
    """A currency and its display conventions."""

    key: int
    name: str
    iso: str | None = None
    symbol: str | None = None
    symbol_prefix: bool = False
    decimal_char: str = "."
    group_char: str | None = None
    precision: int = 2
    rate: Decimal | None = None
    modified: date | None = None
    flags: int = 0

    @property
    def code(self) -> str:
        return self.iso or self.name

    @classmethod
    def from_attributes(cls, attributes: Attributes) -> "Currency":
        """Build a currency from a ``<cur>`` record.

        The name falls back to the ISO code when absent. ``frac`` must be a
        non-negative integer when present.
        """
        raw = to_mapping(attributes)
        key = read_int(raw.get("key"))
        if key is None:
            raise MissingFieldError("currency", "key", raw.get("key"))
        iso = read_text(raw.get("iso"))
        name = read_text(raw.get("name"))
        if name is None or not name.strip():
            name = iso
        if name is None or not name.strip():
            raise MissingFieldError("currency", "name")
        precision = 2
        if "frac" in raw:
            precision = read_int(raw["frac"])
            if precision is None:
                raise InvalidFieldError("currency", "frac", raw["frac"])
        rate = read_decimal(raw.get("rate"))
        return cls(
            key=key,
            name=name,
            iso=iso,
            symbol=read_text(raw.get("symb")),
            symbol_prefix=read_int(raw.get("syprf")) == 1,
            decimal_char=read_text(raw.get("dchar")) or ".",
            group_char=read_text(raw.get("gchar")),
            precision=precision,
            rate=rate if rate else None,
            modified=read_date(raw.get("mdate")),
            flags=read_int(raw.get("flags")) or 0,
        )


__all__ = ["Currency"]
