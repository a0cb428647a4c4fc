from __future__ import annotations

from datetime import date

import pandas as pd
import pytest

from wpa_analytics.clean.transform import camel_clean, parse_dates, rename_group, us_to_space
from wpa_analytics.clean.validate import (
    InvalidReturnError,
    MissingColumnsError,
    WpaInputError,
    check_inputs,
    check_return,
)


def test_parse_dates_reads_standard_query_format() -> None:
    out = parse_dates(pd.Series(["1/5/2020", "12/31/2019"]))
    assert list(out.dt.date) == [date(2020, 1, 5), date(2019, 12, 31)]


def test_parse_dates_falls_back_to_iso() -> None:
    out = parse_dates(pd.Series(["2020-01-05", "2020-02-01"]))
    assert list(out.dt.date) == [date(2020, 1, 5), date(2020, 2, 1)]


def test_parse_dates_normalizes_datetimes() -> None:
    out = parse_dates(pd.Series(pd.to_datetime(["2020-01-05 13:45"])))
    assert out.iloc[0] == pd.Timestamp("2020-01-05")


def test_rename_group_replaces_existing_group_column() -> None:
    df = pd.DataFrame({"group": [1], "Organization": ["X"]})
    out = rename_group(df, "Organization")
    assert list(out.columns) == ["group"]
    assert out.loc[0, "group"] == "X"


def test_label_helpers() -> None:
    assert camel_clean("LevelDesignation") == "Level Designation"
    assert camel_clean("HROrg") == "HR Org"
    assert camel_clean("Organization") == "Organization"
    assert us_to_space("Meeting_hours") == "Meeting hours"


def test_check_inputs_lists_every_missing_column() -> None:
    df = pd.DataFrame({"PersonId": ["a"], "Date": ["1/5/2020"]})
    with pytest.raises(MissingColumnsError) as excinfo:
        check_inputs(df, ["PersonId", "Email_hours", "HireDate", "Email_hours"])
    assert excinfo.value.missing == ["Email_hours", "HireDate"]
    assert "`Email_hours`, `HireDate`" in str(excinfo.value)


def test_check_inputs_passes_when_present() -> None:
    df = pd.DataFrame({"PersonId": ["a"]})
    check_inputs(df, ["PersonId"])


def test_check_return() -> None:
    assert check_return("table", ("plot", "table")) == "table"
    with pytest.raises(InvalidReturnError) as excinfo:
        check_return("chart", ("plot", "table"))
    assert isinstance(excinfo.value, WpaInputError)
    assert isinstance(excinfo.value, ValueError)
    assert "'plot', 'table'" in str(excinfo.value)
