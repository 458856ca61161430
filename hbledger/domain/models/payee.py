"""Payee entity."""

from dataclasses import dataclass

from hbledger.domain.errors import MissingFieldError
from hbledger.domain.models.enums import PayMode
from hbledger.domain.services.records import (
    Attributes,
    read_id,
    read_int,
    read_text,
    to_mapping,
)


@dataclass(frozen=True)
class Payee:
    """Counterparty of a transaction.

    ``category`` and ``pay_mode`` are the defaults HomeBank suggests when
    the payee is picked; unknown pay mode codes are dropped.
    """

    key: int
    name: str
    category: int | None = None
    pay_mode: PayMode | None = None

    @classmethod
    def from_attributes(cls, attributes: Attributes) -> "Payee":
        raw = to_mapping(attributes)
        key = read_int(raw.get("key"))
        if key is None:
            raise MissingFieldError("payee", "key", raw.get("key"))
        name = read_text(raw.get("name"))
        if name is None or not name.strip():
            raise MissingFieldError("payee", "name", raw.get("name"))
        pay_mode = None
        code = read_int(raw.get("paymode"))
        if code is not None:
            try:
                pay_mode = PayMode.from_code(code)
            except ValueError:
                pay_mode = None
        return cls(
            key=key,
            name=name,
            category=read_id(raw.get("category")),
            pay_mode=pay_mode,
        )


__all__ = ["Payee"]
