"""Application port for reading raw ledger records."""

from typing import Protocol

from hbledger.domain.ledger import LedgerRecords


class LedgerSourcePort(Protocol):
    """Port exposing the attribute records of one ledger file."""

    def read_records(self) -> LedgerRecords:
        """Return every record of the ledger grouped by element name."""


__all__ = ["LedgerSourcePort"]
