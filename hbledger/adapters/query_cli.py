"""CLI adapter to query a HomeBank ledger.

Usage::

    hb [-c CONFIG] [-f FILE] query transactions --category Groceries
    hb query budget --date-from 2020-03-01 --date-to 2020-04-01
"""

import argparse
import sys
from collections.abc import Sequence
from datetime import date

from hbledger.application.queries import (
    AccountQuery,
    BudgetQuery,
    CategoryQuery,
    GroupQuery,
    PayeeQuery,
    TransactionQuery,
)
from hbledger.application.use_cases.get_budget_report import (
    GetBudgetReportUseCase,
)
from hbledger.application.use_cases.search_transactions import (
    SearchTransactionsUseCase,
)
from hbledger.domain.errors import LedgerError
from hbledger.domain.ledger import LedgerStore
from hbledger.infrastructure.container import load_ledger
from hbledger.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from hbledger.infrastructure.settings import ConfigError, LedgerSettings

NAMED_QUERIES = {
    "categories": CategoryQuery,
    "groups": GroupQuery,
    "payees": PayeeQuery,
    "accounts": AccountQuery,
}


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the ``hb`` command."""
    parser = argparse.ArgumentParser(
        prog="hb",
        description="Query a HomeBank ledger file.",
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Path to the hb configuration file",
    )
    parser.add_argument(
        "-f",
        "--file",
        help="Path to the HomeBank .xhb file (overrides the config)",
    )
    commands = parser.add_subparsers(dest="command")
    query = commands.add_parser("query", help="Query the ledger")
    kinds = query.add_subparsers(dest="kind", required=True)

    transactions = kinds.add_parser(
        "transactions",
        help="List transactions matching every filter",
    )
    transactions.add_argument("-d", "--date-from", dest="date_from",
                              metavar="date", help="Include from this date")
    transactions.add_argument("-D", "--date-to", dest="date_to",
                              metavar="date", help="Exclude from this date")
    transactions.add_argument("--account", metavar="id")
    transactions.add_argument("--payee", metavar="regex")
    transactions.add_argument("--category", metavar="regex")
    transactions.add_argument("--status", metavar="status")
    transactions.add_argument("--paymode", dest="pay_mode", metavar="mode")
    transactions.add_argument("--amount-min", dest="amount_min",
                              metavar="amount")
    transactions.add_argument("--amount-max", dest="amount_max",
                              metavar="amount")
    transactions.add_argument("--tag", metavar="tag")
    transactions.add_argument("--memo", metavar="regex")
    transactions.add_argument("--info", metavar="regex")

    for kind in NAMED_QUERIES:
        named = kinds.add_parser(kind, help=f"List {kind} by name")
        named.add_argument("name", nargs="?", metavar="regex")

    budget = kinds.add_parser(
        "budget",
        help="Compare budget and spending per category",
    )
    budget.add_argument("name", nargs="?", metavar="regex")
    budget.add_argument("-d", "--date-from", dest="date_from",
                        metavar="date",
                        help="Window start (default: first of this month)")
    budget.add_argument("-D", "--date-to", dest="date_to", metavar="date",
                        help="Window end (default: first of next month)")
    return parser


def _resolve_ledger(args: argparse.Namespace) -> LedgerStore:
    if args.file:
        return load_ledger(args.file)
    if args.config:
        settings = LedgerSettings.from_config_file(args.config)
        return load_ledger(settings.ledger_file)
    return load_ledger()


def _format_amount(value) -> str:
    if value is None:
        return "-"
    return f"{value:,.2f}"


def run_query(
    args: argparse.Namespace,
    ledger: LedgerStore,
    today: date | None = None,
) -> list[str]:
    """Execute the parsed query and return the output lines."""
    options = vars(args)
    if args.kind == "transactions":
        query = TransactionQuery.from_options(options)
        result = SearchTransactionsUseCase(ledger).execute(query)
        lines = [
            f"{view.date.isoformat()}  {_format_amount(view.amount):>12}  "
            f"{view.account_name or '-'}  {view.payee_name or '-'}  "
            f"{view.category_name or '-'}  {view.memo or ''}".rstrip()
            for view in result.transactions
        ]
        lines.append(f"Total: {_format_amount(result.total)}")
        return lines
    if args.kind == "budget":
        query = BudgetQuery.from_options(options, today=today)
        report = GetBudgetReportUseCase(ledger).execute(query)
        lines = [
            f"{row.category_name:<40} {_format_amount(row.spent):>12} "
            f"{_format_amount(row.allotment):>12}"
            for row in report.rows
        ]
        lines.append(
            f"{'Total':<40} {_format_amount(report.total_spent):>12} "
            f"{_format_amount(report.total_allotment):>12}"
        )
        return lines
    query = NAMED_QUERIES[args.kind].from_options(options)
    items = query.execute(ledger)
    if args.kind == "categories":
        names = [ledger.category_full_name(item.key) for item in items]
        return sorted(names)
    return [item.name for item in items]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``hb`` command and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command != "query":
        parser.print_help()
        return 0

    logger = get_app_logger()
    get_usage_logger().info(f"query {args.kind}")
    try:
        ledger = _resolve_ledger(args)
        lines = run_query(args, ledger)
    except (LedgerError, ConfigError) as exc:
        logger.error(str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
