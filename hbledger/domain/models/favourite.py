"""Favourite (scheduled or template transaction) entity."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from hbledger.domain.errors import MissingFieldError
from hbledger.domain.models.enums import (
    PayMode,
    TransactionStatus,
    TransactionType,
)
from hbledger.domain.models.transaction import read_pay_mode, read_status
from hbledger.domain.services.records import (
    Attributes,
    read_date,
    read_decimal,
    read_id,
    read_int,
    read_tags,
    read_text,
    to_mapping,
)


@dataclass(frozen=True)
class Favourite:
    """A transaction template, optionally scheduled.

    The transaction-like fields mirror :class:`Transaction`. ``next_date``,
    ``every``, ``unit`` and ``limit`` describe the schedule when HomeBank
    posts the template automatically.
    """

    key: int
    amount: Decimal
    account: int
    pay_mode: PayMode = PayMode.NONE
    status: TransactionStatus = TransactionStatus.NONE
    flags: int | None = None
    payee: int | None = None
    category: int | None = None
    memo: str | None = None
    info: str | None = None
    tags: tuple[str, ...] | None = None
    transaction_type: TransactionType = TransactionType.EXPENSE
    destination_account: int | None = None
    next_date: date | None = None
    every: int | None = None
    unit: int | None = None
    limit: int | None = None

    @classmethod
    def from_attributes(cls, attributes: Attributes) -> "Favourite":
        raw = to_mapping(attributes)
        key = read_int(raw.get("key"))
        if key is None:
            raise MissingFieldError("favourite", "key", raw.get("key"))
        account = read_int(raw.get("account"))
        if account is None:
            raise MissingFieldError("favourite", "account", raw.get("account"))
        amount = read_decimal(raw.get("amount"))
        if amount is None:
            raise MissingFieldError("favourite", "amount", raw.get("amount"))

        pay_mode = read_pay_mode(raw, entity="favourite")
        destination = read_id(raw.get("dst_account"))
        is_transfer = (
            destination is not None
            or pay_mode is PayMode.INTERNAL_TRANSFER
        )
        return cls(
            key=key,
            amount=amount,
            account=account,
            pay_mode=pay_mode,
            status=read_status(raw, entity="favourite"),
            flags=read_int(raw.get("flags")),
            payee=read_id(raw.get("payee")),
            category=read_id(raw.get("category")),
            memo=read_text(raw.get("wording")),
            info=read_text(raw.get("info")),
            tags=read_tags(raw.get("tags")),
            transaction_type=TransactionType.from_amount(amount, is_transfer),
            destination_account=destination,
            next_date=read_date(raw.get("nextdate")),
            every=read_int(raw.get("every")),
            unit=read_int(raw.get("unit")),
            limit=read_int(raw.get("limit")),
        )


__all__ = ["Favourite"]
