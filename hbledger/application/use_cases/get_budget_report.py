"""Use case to compute the budget report for a date window."""

from hbledger.application.queries.budget import BudgetQuery
from hbledger.domain.ledger import LedgerStore
from hbledger.domain.models import BudgetReport
from hbledger.infrastructure.logging.logger import get_app_logger
from hbledger.utils.decimal_utils import sum_decimals


class GetBudgetReportUseCase:
    """Execute a budget query and total its rows."""

    def __init__(self, ledger: LedgerStore, logger=None) -> None:
        """Initialize the use case.

        Args:
            ledger: Loaded ledger store.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger = ledger
        self._logger = logger or get_app_logger()

    def execute(self, query: BudgetQuery) -> BudgetReport:
        """Return budget rows for the query window with totals.

        Rows without an allotment count as zero in ``total_allotment``.
        """
        rows = query.execute(self._ledger)
        total_spent = sum_decimals(row.spent for row in rows)
        total_allotment = sum_decimals(
            row.allotment for row in rows if row.allotment is not None
        )
        self._logger.info(
            f"Budget report {query.date_from} to {query.date_to}: "
            f"{len(rows)} categories, spent={total_spent}, "
            f"budget={total_allotment}"
        )
        unbudgeted = [row for row in rows if row.allotment is None]
        if unbudgeted:
            self._logger.warning(
                f"{len(unbudgeted)} categories have no budget in the window"
            )
        return BudgetReport(
            rows=rows,
            date_from=query.date_from,
            date_to=query.date_to,
            total_spent=total_spent,
            total_allotment=total_allotment,
        )


__all__ = ["GetBudgetReportUseCase", "BudgetReport"]
