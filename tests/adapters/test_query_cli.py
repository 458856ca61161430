"""Tests for the query_cli adapter."""

from datetime import date

import pytest

from hbledger.adapters import query_cli


class _Logger:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def info(self, msg: str) -> None:
        self.messages.append(msg)

    def warning(self, msg: str) -> None:
        self.messages.append(msg)

    def error(self, msg: str) -> None:
        self.messages.append(msg)


@pytest.fixture
def loggers(monkeypatch):
    app_logger = _Logger()
    usage_logger = _Logger()
    monkeypatch.setattr(query_cli, "get_app_logger", lambda: app_logger)
    monkeypatch.setattr(query_cli, "get_usage_logger", lambda: usage_logger)
    return app_logger, usage_logger


def test_transactions_query_prints_rows_and_total(
    sample_file,
    capsys,
    loggers,
) -> None:
    """The CLI should list matching transactions followed by the total."""
    code = query_cli.main(
        ["-f", str(sample_file), "query", "transactions",
         "--category", "Groceries"]
    )

    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert len(out) == 4
    assert out[0].startswith("2020-03-05")
    assert "Grocer" in out[0]
    assert "Weekly shop" in out[0]
    assert out[-1] == "Total: -100.00"
    assert loggers[1].messages == ["query transactions"]


def test_categories_query_prints_sorted_full_names(
    sample_file,
    capsys,
    loggers,
) -> None:
    code = query_cli.main(["-f", str(sample_file), "query", "categories", "^Bills"])

    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["Bills", "Bills.Gas"]


def test_budget_query_prints_rows_and_totals(
    sample_file,
    capsys,
    loggers,
) -> None:
    code = query_cli.main(
        ["-f", str(sample_file), "query", "budget",
         "-d", "2020-03-01", "-D", "2020-04-01"]
    )

    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert [line.split()[0] for line in out] == [
        "Auto",
        "Bills",
        "Bills.Gas",
        "Groceries",
        "Total",
    ]
    assert out[2].split()[1:] == ["-45.50", "60.00"]
    assert out[-1].split()[1:] == ["-125.50", "440.00"]


def test_run_query_budget_defaults_to_current_month(ledger) -> None:
    """Without dates the budget window is the month containing today."""
    args = query_cli.build_parser().parse_args(["query", "budget", "Gas"])

    lines = query_cli.run_query(args, ledger, today=date(2020, 3, 11))

    assert lines[0].split() == ["Bills.Gas", "-45.50", "60.00"]


def test_missing_file_reports_error(tmp_path, capsys, loggers) -> None:
    code = query_cli.main(
        ["-f", str(tmp_path / "missing.xhb"), "query", "payees"]
    )

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert captured.err.startswith("error: ")
    assert "does not exist" in loggers[0].messages[0]


def test_invalid_option_reports_error(sample_file, capsys, loggers) -> None:
    code = query_cli.main(
        ["-f", str(sample_file), "query", "transactions",
         "--date-from", "03/01/2020"]
    )

    assert code == 1
    assert "date_from" in capsys.readouterr().err


def test_config_file_selects_ledger(sample_file, tmp_path, capsys, loggers):
    config = tmp_path / "config.toml"
    config.write_text(f"path = '{sample_file.name}'\n")

    code = query_cli.main(["-c", str(config), "query", "accounts"])

    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["Checking", "Savings"]


def test_no_command_prints_help(capsys) -> None:
    assert query_cli.main([]) == 0
    assert "usage: hb" in capsys.readouterr().out
