"""Exception hierarchy for ledger loading and querying."""

from pathlib import Path


class LedgerError(Exception):
    """Base class for every error raised by the ledger core."""


class LoadError(LedgerError):
    """The ledger file could not be turned into a store."""

    reason = "could not be loaded"

    def __init__(self, path: Path | str | None, detail: str | None = None):
        self.path = Path(path) if path is not None else None
        self.detail = detail
        message = f"Ledger file `{self.path}` {self.reason}."
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)


class SourceNotFoundError(LoadError):
    reason = "does not exist"


class SourceUnreadableError(LoadError):
    reason = "could not be read"


class MalformedSourceError(LoadError):
    reason = "is not a well-formed HomeBank file"


class EntityError(LedgerError):
    """A record could not be turned into an entity."""

    problem = "is invalid"

    def __init__(self, entity: str, field: str, value: str | None = None):
        self.entity = entity
        self.field = field
        self.value = value
        message = f"Field `{field}` of {entity} {self.problem}"
        if value is not None:
            message = f"{message} (got {value!r})"
        super().__init__(f"{message}.")


class MissingFieldError(EntityError):
    problem = "is missing"


class InvalidFieldError(EntityError):
    problem = "is invalid"


class MissingDateError(MissingFieldError):
    def __init__(self, value: str | None = None):
        super().__init__("transaction", "date", value)


class MissingAmountError(MissingFieldError):
    def __init__(self, value: str | None = None):
        super().__init__("transaction", "amount", value)


class MissingAccountError(MissingFieldError):
    def __init__(self, value: str | None = None):
        super().__init__("transaction", "account", value)


class MissingPayModeError(MissingFieldError):
    def __init__(self, value: str | None = None):
        super().__init__("transaction", "paymode", value)


class MissingPayeeError(MissingFieldError):
    def __init__(self, value: str | None = None):
        super().__init__("transaction", "payee", value)


class InvalidStatusError(InvalidFieldError):
    def __init__(self, value: str | None = None, entity: str = "transaction"):
        super().__init__(entity, "status", value)


class InvalidPayModeError(InvalidFieldError):
    def __init__(self, value: str | None = None, entity: str = "transaction"):
        super().__init__(entity, "paymode", value)


class CategoryCycleError(LedgerError):
    """Category parent links loop back on themselves."""

    def __init__(self, category_id: int, chain: list[int]):
        self.category_id = category_id
        self.chain = chain
        path = " -> ".join(str(item) for item in chain)
        super().__init__(
            f"Category {category_id} has a cyclic parent chain: {path}."
        )


class QueryOptionError(LedgerError):
    """A textual query option could not be parsed."""

    def __init__(self, option: str, value: str, detail: str = ""):
        self.option = option
        self.value = value
        message = f"Invalid value {value!r} for option `{option}`"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(f"{message}.")


__all__ = [
    "LedgerError",
    "LoadError",
    "SourceNotFoundError",
    "SourceUnreadableError",
    "MalformedSourceError",
    "EntityError",
    "MissingFieldError",
    "InvalidFieldError",
    "MissingDateError",
    "MissingAmountError",
    "MissingAccountError",
    "MissingPayModeError",
    "MissingPayeeError",
    "InvalidStatusError",
    "InvalidPayModeError",
    "CategoryCycleError",
    "QueryOptionError",
]
