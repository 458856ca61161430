"""Shared fixtures: a small HomeBank ledger and log redirection."""

import pytest

from hbledger.domain.ledger import LedgerStore
from hbledger.infrastructure.logging import logger as logger_module
from hbledger.infrastructure.xhb_source import XhbLedgerSource

# Day offsets: 737850 is 2020-03-01, 737881 is 2020-04-01.
SAMPLE_XHB = """<?xml version="1.0"?>
<homebank v="1.3999999999999999" d="050504">
<properties title="Household" curr="1" auto_smode="1" auto_weekday="1"/>
<cur key="1" flags="0" iso="USD" name="US Dollar" symb="$" syprf="1" dchar="." gchar="," frac="2" rate="0" mdate="0"/>
<cur key="2" iso="EUR" name="Euro" symb="E" frac="2" rate="1.1"/>
<grp key="1" name="Everyday"/>
<grp key="2" name="Closed accounts" flags="1"/>
<account key="1" pos="1" type="1" curr="1" grp="1" name="Checking" initial="100"/>
<account key="2" pos="2" type="1" curr="2" name="Savings"/>
<pay key="1" name="Grocer"/>
<pay key="2" name="Utility Co" category="3" paymode="8"/>
<cat key="1" name="Groceries" b0="200"/>
<cat key="2" name="Bills" b0="100"/>
<cat key="3" parent="2" flags="1" name="Gas" b1="50" b3="60"/>
<cat key="4" name="Auto" b0="80"/>
<cat key="5" flags="2" name="Salary"/>
<fav key="1" amount="-45" account="1" paymode="8" payee="2" category="3" wording="Monthly gas" nextdate="737881" every="1" unit="2"/>
<ope date="737854" amount="-50" account="1" paymode="3" st="1" payee="1" category="1" wording="Weekly shop" tags="food,weekly"/>
<ope date="737869" amount="-30" account="1" paymode="6" st="2" payee="1" category="1" info="receipt 42" tags="food"/>
<ope date="737860" amount="-45.50" account="1" paymode="8" payee="2" category="3" wording="Gas bill"/>
<ope date="737881" amount="-20" account="1" paymode="3" payee="1" category="1"/>
<ope date="737850" amount="1500" account="1" paymode="4" category="5" wording="March salary"/>
<ope date="737864" amount="-200" account="1" paymode="5" dst_account="2" kxfer="1" wording="To savings"/>
<ope date="737864" amount="200" account="2" paymode="5" dst_account="1" kxfer="1" wording="To savings"/>
<ope date="737835" amount="-60" account="2" paymode="1" payee="2" category="4"/>
<unknown key="9" name="ignored"/>
</homebank>
"""


@pytest.fixture(autouse=True)
def _logs_in_tmp(tmp_path_factory, monkeypatch):
    """Keep log files produced during tests out of the repository."""
    log_root = tmp_path_factory.getbasetemp()
    monkeypatch.setattr(logger_module, "get_project_root", lambda: log_root)


@pytest.fixture
def sample_xhb() -> str:
    return SAMPLE_XHB


@pytest.fixture
def sample_file(tmp_path, sample_xhb):
    path = tmp_path / "household.xhb"
    path.write_text(sample_xhb, encoding="utf-8")
    return path


@pytest.fixture
def ledger(sample_xhb) -> LedgerStore:
    records = XhbLedgerSource.records_from_string(sample_xhb)
    return LedgerStore.from_records(records)
