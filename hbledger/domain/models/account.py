"""Account entity."""

from dataclasses import dataclass
from decimal import Decimal

from hbledger.domain.errors import MissingFieldError
from hbledger.domain.services.records import (
    Attributes,
    read_decimal,
    read_id,
    read_int,
    read_text,
    to_mapping,
)


@dataclass(frozen=True)
class Account:
    """A bank, cash or asset account holding transactions.

    Attributes:
        key: Unique account id.
        name: Display name, never empty.
        currency: Id of the account currency, if set.
        group: Id of the account group, if set.
        account_type: Raw HomeBank account type code.
        flags: Raw flag bits.
        position: Display position in HomeBank.
        number: Bank account number.
        bank_name: Name of the bank.
        initial: Opening balance.
        minimum: Overdraft warning threshold.
    """

    key: int
    name: str
    currency: int | None = None
    group: int | None = None
    account_type: int = 0
    flags: int = 0
    position: int | None = None
    number: str | None = None
    bank_name: str | None = None
    initial: Decimal = Decimal("0")
    minimum: Decimal = Decimal("0")

    @classmethod
    def from_attributes(cls, attributes: Attributes) -> "Account":
        """Build an account from an ``<account>`` record.

        Raises:
            MissingFieldError: If ``key`` or ``name`` is missing or invalid.
        """
        raw = to_mapping(attributes)
        key = read_int(raw.get("key"))
        if key is None:
            raise MissingFieldError("account", "key", raw.get("key"))
        name = read_text(raw.get("name"))
        if name is None or not name.strip():
            raise MissingFieldError("account", "name", raw.get("name"))
        return cls(
            key=key,
            name=name,
            currency=read_id(raw.get("curr")),
            group=read_id(raw.get("grp")),
            account_type=read_int(raw.get("type")) or 0,
            flags=read_int(raw.get("flags")) or 0,
            position=read_int(raw.get("pos")),
            number=read_text(raw.get("number")),
            bank_name=read_text(raw.get("bankname")),
            initial=read_decimal(raw.get("initial")) or Decimal("0"),
            minimum=read_decimal(raw.get("minimum")) or Decimal("0"),
        )


__all__ = ["Account"]
