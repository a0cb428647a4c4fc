from __future__ import annotations

import logging

import altair as alt
import pandas as pd
import pytest

from wpa_analytics.analyses.tenure import identify_tenure
from wpa_analytics.clean.validate import InvalidReturnError, MissingColumnsError
from wpa_analytics.models import TenureSummary


@pytest.fixture
def hires() -> pd.DataFrame:
    return pd.DataFrame({
        "PersonId": ["a", "a", "b", "b", "c", "c"],
        "Date": ["01/05/2020", "01/12/2020"] * 3,
        "HireDate": ["01/12/2019", "01/12/2019", "01/13/2017", "01/13/2017", "01/01/1970", "01/01/1970"],
    })


def test_identify_tenure_data(hires: pd.DataFrame) -> None:
    out = identify_tenure(hires, return_="data")
    assert list(out.columns) == ["PersonId", "TenureYear"]
    assert list(out["PersonId"]) == ["a", "b", "c"]
    years = out.set_index("PersonId")["TenureYear"]
    assert years["a"] == pytest.approx(1.0)
    assert years["b"] == pytest.approx(1094 / 365)
    assert years["c"] == pytest.approx(18273 / 365)


def test_identify_tenure_summary(hires: pd.DataFrame) -> None:
    s = identify_tenure(hires, maxten=40, return_="summary")
    assert isinstance(s, TenureSummary)
    assert s.n_over_max == 1
    assert s.max_tenure == pytest.approx(18273 / 365)
    assert s.mean_tenure == pytest.approx((365 + 1094 + 18273) / 3 / 365)


def test_identify_tenure_text_and_message(hires: pd.DataFrame, caplog: pytest.LogCaptureFixture) -> None:
    text = identify_tenure(hires, maxten=40, return_="text")
    assert text.startswith("The mean tenure is 18.0 years.")
    assert "There are 1 employees with a tenure greater than 40 years." in text

    with caplog.at_level(logging.INFO, logger="wpa_analytics.analyses.tenure"):
        assert identify_tenure(hires, maxten=40, return_="message") is None
    assert text in caplog.text


def test_identify_tenure_cleaned_and_dirty_rows(hires: pd.DataFrame) -> None:
    cleaned = identify_tenure(hires, maxten=40, return_="data_cleaned")
    dirty = identify_tenure(hires, maxten=40, return_="data_dirty")
    assert set(cleaned["PersonId"]) == {"a", "b"}
    assert set(dirty["PersonId"]) == {"c"}
    assert len(cleaned) + len(dirty) == len(hires)


def test_identify_tenure_uses_configured_maxten(hires: pd.DataFrame, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WPA_MAXTEN", "2")
    dirty = identify_tenure(hires, return_="data_dirty")
    assert set(dirty["PersonId"]) == {"b", "c"}


def test_identify_tenure_plot(hires: pd.DataFrame) -> None:
    chart = identify_tenure(hires, return_="plot")
    assert isinstance(chart, alt.Chart)


def test_identify_tenure_requires_hire_date(hires: pd.DataFrame) -> None:
    with pytest.raises(MissingColumnsError):
        identify_tenure(hires.drop(columns="HireDate"))


def test_identify_tenure_rejects_bad_return(hires: pd.DataFrame) -> None:
    with pytest.raises(InvalidReturnError):
        identify_tenure(hires, return_="table")
