"""Transaction entity."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from hbledger.domain.errors import (
    InvalidPayModeError,
    InvalidStatusError,
    MissingAccountError,
    MissingAmountError,
    MissingDateError,
    MissingPayeeError,
    MissingPayModeError,
)
from hbledger.domain.models.enums import (
    PayMode,
    TransactionStatus,
    TransactionType,
)
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

_STATUS_ATTRIBUTES = ("st", "status")


@dataclass(frozen=True)
class Transaction:
    """A single ledger operation (``<ope>`` record).

    Attributes:
        date: Calendar date of the operation.
        amount: Signed amount; negative values leave the account.
        account: Id of the account the operation belongs to.
        pay_mode: Payment method.
        status: Reconciliation status.
        flags: Raw flag bits, if present.
        payee: Payee id, if set.
        category: Category id, if set.
        memo: Free text ("wording" in the file).
        info: Free text such as a cheque number.
        tags: Ordered tags, None when the record has none.
        transaction_type: Income, expense or transfer.
        destination_account: Target account of a transfer.
        transfer_key: Key pairing both sides of a transfer.
    """

    date: date
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
    transfer_key: int | None = None

    @property
    def is_transfer(self) -> bool:
        return self.transaction_type is TransactionType.TRANSFER

    @classmethod
    def from_attributes(cls, attributes: Attributes) -> "Transaction":
        """Build a transaction from an ``<ope>`` record.

        Required fields fail with their own error when missing or not
        parsable. Optional fields that cannot be parsed are left unset.

        Raises:
            MissingAccountError, MissingAmountError, MissingDateError,
            MissingPayModeError, MissingPayeeError, InvalidPayModeError,
            InvalidStatusError.
        """
        raw = to_mapping(attributes)

        account = read_int(raw.get("account"))
        if account is None:
            raise MissingAccountError(raw.get("account"))
        amount = read_decimal(raw.get("amount"))
        if amount is None:
            raise MissingAmountError(raw.get("amount"))
        when = read_date(raw.get("date"))
        if when is None:
            raise MissingDateError(raw.get("date"))

        pay_mode = read_pay_mode(raw)
        status = read_status(raw)

        payee = None
        if "payee" in raw:
            if read_int(raw["payee"]) is None:
                raise MissingPayeeError(raw["payee"])
            payee = read_id(raw["payee"])

        destination = read_id(raw.get("dst_account"))
        transfer_key = read_id(raw.get("kxfer"))
        is_transfer = (
            destination is not None
            or transfer_key is not None
            or pay_mode is PayMode.INTERNAL_TRANSFER
        )

        return cls(
            date=when,
            amount=amount,
            account=account,
            pay_mode=pay_mode,
            status=status,
            flags=read_int(raw.get("flags")),
            payee=payee,
            category=read_id(raw.get("category")),
            memo=read_text(raw.get("wording")),
            info=read_text(raw.get("info")),
            tags=read_tags(raw.get("tags")),
            transaction_type=TransactionType.from_amount(amount, is_transfer),
            destination_account=destination,
            transfer_key=transfer_key,
        )


def read_pay_mode(raw: dict[str, str], entity: str = "transaction") -> PayMode:
    """Read the required pay mode code, defaulting to None when absent."""
    if "paymode" not in raw:
        return PayMode.NONE
    code = read_int(raw["paymode"])
    if code is None:
        if entity == "transaction":
            raise MissingPayModeError(raw["paymode"])
        raise InvalidPayModeError(raw["paymode"], entity=entity)
    try:
        return PayMode.from_code(code)
    except ValueError:
        raise InvalidPayModeError(raw["paymode"], entity=entity) from None


def read_status(
    raw: dict[str, str],
    entity: str = "transaction",
) -> TransactionStatus:
    """Read the status code; absent or unparsable codes mean None."""
    for name in _STATUS_ATTRIBUTES:
        if name not in raw:
            continue
        code = read_int(raw[name])
        if code is None:
            return TransactionStatus.NONE
        try:
            return TransactionStatus.from_code(code)
        except ValueError:
            raise InvalidStatusError(raw[name], entity=entity) from None
    return TransactionStatus.NONE


__all__ = ["Transaction", "read_pay_mode", "read_status"]
