"""Composition root for wiring infrastructure adapters."""

from pathlib import Path

from hbledger.application.ports.ledger_source import LedgerSourcePort
from hbledger.application.use_cases.load_ledger import LoadLedgerUseCase
from hbledger.domain.errors import SourceNotFoundError
from hbledger.domain.ledger import LedgerStore
from hbledger.infrastructure.logging.logger import get_app_logger
from hbledger.infrastructure.settings import LedgerSettings
from hbledger.infrastructure.xhb_source import XhbLedgerSource


def build_ledger_source(path: Path | str | None = None) -> LedgerSourcePort:
    """Return the record source for the configured ledger file.

    Args:
        path: Optional explicit path overriding the settings.

    Raises:
        SourceNotFoundError: If no ledger file is configured.
    """
    resolved = path
    if resolved is None:
        resolved = LedgerSettings.from_env().ledger_file
    if resolved is None:
        raise SourceNotFoundError(
            None,
            "Set HOMEBANK_FILE or add `path` to the config file.",
        )
    return XhbLedgerSource(resolved, logger=get_app_logger())


def load_ledger(path: Path | str | None = None) -> LedgerStore:
    """Load the ledger store from ``path`` or the configured file."""
    source = build_ledger_source(path)
    return LoadLedgerUseCase(source, logger=get_app_logger()).execute()


__all__ = ["build_ledger_source", "load_ledger"]
