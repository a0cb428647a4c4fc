from __future__ import annotations

import json
import logging

import altair as alt
import pandas as pd
import pytest

from wpa_analytics.analyses.bar import create_bar, email_sum, meeting_sum


def test_create_bar_table(sq_data: pd.DataFrame) -> None:
    out = create_bar(sq_data, metric="Meeting_hours", hrvar="Organization", mingroup=5, return_="table")
    assert list(out.columns) == ["group", "Meeting_hours", "Employee_Count"]
    assert list(out["group"]) == ["Finance", "Sales"]
    assert list(out["Meeting_hours"]) == pytest.approx([13.5, 19.0])


def test_create_bar_all_groups_suppressed(sq_data: pd.DataFrame) -> None:
    out = create_bar(sq_data, metric="Email_hours", hrvar="Organization", mingroup=50, return_="table")
    assert out.empty


def test_create_bar_plot(sq_data: pd.DataFrame) -> None:
    chart = meeting_sum(sq_data, hrvar="Organization", mingroup=5)
    assert isinstance(chart, alt.LayerChart)
    assert chart.title.text == "Meeting hours"


def test_email_sum_table(sq_data: pd.DataFrame) -> None:
    out = email_sum(sq_data, hrvar="LevelDesignation", mingroup=5, return_="table")
    assert dict(zip(out["group"], out["Employee_Count"])) == {"Junior": 8, "Senior": 5}
    assert list(out["Email_hours"]) == pytest.approx([5.5, 5.5])


def test_create_bar_plot_leaves_out_small_groups(sq_data: pd.DataFrame) -> None:
    chart = create_bar(sq_data, metric="Email_hours", hrvar="Organization", mingroup=5)
    spec = json.dumps(chart.to_dict())
    assert '"Sales"' in spec
    assert '"HR"' not in spec


def test_create_bar_warns_when_every_group_is_suppressed(
    sq_data: pd.DataFrame, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger="wpa_analytics.analyses.bar"):
        chart = create_bar(sq_data, metric="Email_hours", hrvar="Organization", mingroup=50)
    assert isinstance(chart, alt.LayerChart)
    assert "No group passed the privacy threshold" in caplog.text
