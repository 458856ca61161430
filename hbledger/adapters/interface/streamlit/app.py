"""Streamlit dashboard for budgets and transactions."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import altair as alt
import streamlit as st

from hbledger.application.queries import BudgetQuery, TransactionQuery
from hbledger.application.use_cases.get_budget_report import (
    GetBudgetReportUseCase,
)
from hbledger.application.use_cases.search_transactions import (
    SearchTransactionsUseCase,
    TransactionView,
)
from hbledger.domain.errors import LedgerError
from hbledger.domain.ledger import LedgerStore
from hbledger.domain.models import BudgetReport
from hbledger.domain.services.dates import default_window
from hbledger.infrastructure.container import load_ledger
from hbledger.infrastructure.settings import ConfigError


def _fetch_ledger() -> LedgerStore:
    """Load the configured ledger file."""
    return load_ledger()


@st.cache_resource(show_spinner=False)
def _load_ledger() -> LedgerStore:
    """Cached wrapper around _fetch_ledger for Streamlit sessions."""
    return _fetch_ledger()


def _format_amount(value: Decimal | None) -> str:
    """Format amounts for display."""
    if value is None:
        return "-"
    return f"{value:,.2f}"


def _budget_table(report: BudgetReport) -> list[dict[str, str]]:
    return [
        {
            "Category": row.category_name,
            "Spent": _format_amount(row.spent),
            "Budget": _format_amount(row.allotment),
            "Remaining": _format_amount(row.remaining),
        }
        for row in report.rows
    ]


def _budget_chart_data(report: BudgetReport) -> list[dict[str, str | float]]:
    """Return long-form rows for a grouped spent/budget bar chart.

    Spending is shown as a positive magnitude so both bars grow the same
    way.
    """
    data: list[dict[str, str | float]] = []
    for row in report.rows:
        data.append(
            {
                "category": row.category_name,
                "measure": "Spent",
                "amount": float(abs(row.spent)),
            }
        )
        if row.allotment is not None:
            data.append(
                {
                    "category": row.category_name,
                    "measure": "Budget",
                    "amount": float(abs(row.allotment)),
                }
            )
    return data


def _render_budget_chart(report: BudgetReport) -> None:
    data = _budget_chart_data(report)
    if not data:
        st.info("No budgeted categories in this window.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar().encode(
        y=alt.Y("category:N", sort=None, title=None),
        x=alt.X("amount:Q", title="Amount"),
        yOffset=alt.YOffset("measure:N"),
        color=alt.Color(
            "measure:N",
            scale=alt.Scale(range=["#e76f51", "#2e7d32"]),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("measure:N"),
            alt.Tooltip("amount:Q", format=",.2f"),
        ],
    )
    st.altair_chart(chart, use_container_width=True)


def _render_budget(ledger: LedgerStore, today: date) -> None:
    default_from, default_to = default_window(today)
    left, right = st.columns(2)
    date_from = left.date_input("From", value=default_from)
    date_to = right.date_input("To (excluded)", value=default_to)
    pattern = st.text_input("Category", placeholder="Regular expression")

    query = BudgetQuery.from_options(
        {"name": pattern, "date_from": date_from, "date_to": date_to},
        today=today,
    )
    report = GetBudgetReportUseCase(ledger).execute(query)

    spent_col, budget_col = st.columns(2)
    spent_col.metric("Spent", _format_amount(report.total_spent))
    budget_col.metric("Budget", _format_amount(report.total_allotment))
    _render_budget_chart(report)
    st.dataframe(_budget_table(report), use_container_width=True,
                 hide_index=True)


def _transaction_table(
    views: Sequence[TransactionView],
) -> list[dict[str, str]]:
    return [
        {
            "Date": view.date.isoformat(),
            "Amount": _format_amount(view.amount),
            "Account": view.account_name or "-",
            "Payee": view.payee_name or "-",
            "Category": view.category_name or "-",
            "Memo": view.memo or "",
            "Status": view.status.label,
        }
        for view in views
    ]


def _render_transactions(ledger: LedgerStore, today: date) -> None:
    default_from, default_to = default_window(today)
    left, right = st.columns(2)
    date_from = left.date_input("From", value=default_from)
    date_to = right.date_input("To (excluded)", value=default_to)
    payee = st.text_input("Payee", placeholder="Regular expression")
    category = st.text_input("Category", placeholder="Regular expression")
    memo = st.text_input("Memo", placeholder="Regular expression")

    query = TransactionQuery.from_options(
        {
            "date_from": date_from,
            "date_to": date_to,
            "payee": payee,
            "category": category,
            "memo": memo,
        }
    )
    result = SearchTransactionsUseCase(ledger).execute(query)
    st.caption(
        f"{len(result.transactions)} transactions, "
        f"total {_format_amount(result.total)}"
    )
    st.dataframe(_transaction_table(result.transactions),
                 use_container_width=True, hide_index=True)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="HomeBank Budget", layout="wide")
    st.title("HomeBank Budget")

    try:
        ledger = _load_ledger()
    except (LedgerError, ConfigError) as exc:
        st.warning(str(exc))
        return

    page = st.sidebar.selectbox("Page", ["Budget", "Transactions"])
    today = date.today()
    try:
        if page == "Budget":
            _render_budget(ledger, today)
        else:
            _render_transactions(ledger, today)
    except LedgerError as exc:
        st.warning(str(exc))


if __name__ == "__main__":  # pragma: no cover
    main()
