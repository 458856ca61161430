"""Use case to build the ledger store from a record source."""

from hbledger.application.ports.ledger_source import LedgerSourcePort
from hbledger.domain.ledger import LedgerStore
from hbledger.infrastructure.logging.logger import get_app_logger


class LoadLedgerUseCase:
    """Read every record from a source and index it into a store."""

    def __init__(self, source: LedgerSourcePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            source: Port providing raw ledger records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._source = source
        self._logger = logger or get_app_logger()

    def execute(self) -> LedgerStore:
        """Return the loaded store.

        Errors from reading or from entity construction propagate; no
        partial store is ever returned.
        """
        records = self._source.read_records()
        store = LedgerStore.from_records(records)
        self._logger.info(
            f"Loaded ledger: {len(store.accounts)} accounts, "
            f"{len(store.categories)} categories, "
            f"{len(store.payees)} payees, "
            f"{len(store.transactions)} transactions"
        )
        dangling = self._count_dangling_references(store)
        if dangling:
            self._logger.warning(
                f"{dangling} transactions reference unknown accounts, "
                "payees or categories"
            )
        return store

    @staticmethod
    def _count_dangling_references(store: LedgerStore) -> int:
        count = 0
        for transaction in store.transactions:
            if (
                transaction.account not in store.accounts
                or (
                    transaction.payee is not None
                    and transaction.payee not in store.payees
                )
                or (
                    transaction.category is not None
                    and transaction.category not in store.categories
                )
            ):
                count += 1
        return count


__all__ = ["LoadLedgerUseCase"]
