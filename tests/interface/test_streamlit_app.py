"""Tests for the Streamlit app module."""

from datetime import date
from decimal import Decimal

from hbledger.adapters.interface.streamlit import app
from hbledger.application.queries import BudgetQuery
from hbledger.application.use_cases.get_budget_report import (
    GetBudgetReportUseCase,
)
from hbledger.domain.errors import SourceNotFoundError
from hbledger.domain.models import BudgetReport, BudgetRow

MARCH = {"From": date(2020, 3, 1), "To (excluded)": date(2020, 4, 1)}


def test_fetch_ledger_invokes_container(monkeypatch):
    """_fetch_ledger should delegate to the composition root."""
    monkeypatch.setattr(app, "load_ledger", lambda: "ledger")

    assert app._fetch_ledger() == "ledger"


def test_budget_table_formats_amounts(ledger):
    query = BudgetQuery.create(
        date_from=date(2020, 3, 1),
        date_to=date(2020, 4, 1),
    )
    report = GetBudgetReportUseCase(ledger).execute(query)

    table = app._budget_table(report)

    assert table[2] == {
        "Category": "Bills.Gas",
        "Spent": "-45.50",
        "Budget": "60.00",
        "Remaining": "14.50",
    }


def test_budget_chart_data_skips_missing_allotment():
    report = BudgetReport(
        rows=[
            BudgetRow("Bills.Gas", Decimal("-10"), None),
            BudgetRow("Groceries", Decimal("-80"), Decimal("200")),
        ],
        date_from=date(2020, 2, 1),
        date_to=date(2020, 3, 1),
        total_spent=Decimal("-90"),
        total_allotment=Decimal("200"),
    )

    data = app._budget_chart_data(report)

    assert data == [
        {"category": "Bills.Gas", "measure": "Spent", "amount": 10.0},
        {"category": "Groceries", "measure": "Spent", "amount": 80.0},
        {"category": "Groceries", "measure": "Budget", "amount": 200.0},
    ]


class _FakeColumn:
    def __init__(self, owner) -> None:
        self.owner = owner

    def date_input(self, label, value=None):
        return MARCH.get(label, value)

    def metric(self, label, value):
        self.owner.metrics[label] = value


class _FakeSidebar:
    def __init__(self, page: str) -> None:
        self.page = page

    def selectbox(self, label, options):
        assert self.page in options
        return self.page


class _FakeStreamlit:
    def __init__(self, page: str = "Budget", inputs=None) -> None:
        self.sidebar = _FakeSidebar(page)
        self.inputs = inputs or {}
        self.warnings: list[str] = []
        self.captions: list[str] = []
        self.metrics: dict[str, str] = {}
        self.dataframe_payload = None
        self.chart = None

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def warning(self, text: str):
        self.warnings.append(text)

    def info(self, text: str):
        self.info_text = text

    def caption(self, text: str):
        self.captions.append(text)

    def columns(self, count: int):
        return [_FakeColumn(self) for _ in range(count)]

    def text_input(self, label, placeholder=None):
        return self.inputs.get(label, "")

    def altair_chart(self, chart, **kwargs):
        self.chart = chart

    def dataframe(self, data, **kwargs):
        self.dataframe_payload = (data, kwargs)


def test_main_warns_when_ledger_is_missing(monkeypatch):
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)

    def _raise():
        raise SourceNotFoundError(None, "Set HOMEBANK_FILE.")

    monkeypatch.setattr(app, "_load_ledger", _raise)

    app.main()

    assert len(fake_st.warnings) == 1
    assert "Set HOMEBANK_FILE." in fake_st.warnings[0]
    assert fake_st.dataframe_payload is None


def test_main_renders_budget_page(monkeypatch, ledger):
    """The budget page should show totals, a chart and the table."""
    fake_st = _FakeStreamlit(page="Budget")
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_ledger", lambda: ledger)

    app.main()

    assert fake_st.title_text == "HomeBank Budget"
    assert fake_st.metrics == {"Spent": "-125.50", "Budget": "440.00"}
    assert fake_st.chart is not None
    rows, kwargs = fake_st.dataframe_payload
    assert [row["Category"] for row in rows] == [
        "Auto",
        "Bills",
        "Bills.Gas",
        "Groceries",
    ]
    assert kwargs["hide_index"] is True


def test_main_renders_transactions_page(monkeypatch, ledger):
    fake_st = _FakeStreamlit(
        page="Transactions",
        inputs={"Category": "Groceries"},
    )
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_ledger", lambda: ledger)

    app.main()

    assert fake_st.captions == ["2 transactions, total -80.00"]
    rows, _ = fake_st.dataframe_payload
    assert [row["Status"] for row in rows] == ["Cleared", "Reconciled"]


def test_main_warns_on_invalid_pattern(monkeypatch, ledger):
    fake_st = _FakeStreamlit(page="Transactions", inputs={"Payee": "("})
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_ledger", lambda: ledger)

    app.main()

    assert len(fake_st.warnings) == 1
    assert "payee" in fake_st.warnings[0]
