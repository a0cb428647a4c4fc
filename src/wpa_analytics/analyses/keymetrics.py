"""Key metrics scan: a grid of group averages across many metrics.

The table is wide (one row per metric, one column per HR group). The chart
is a heatmap where each row is shaded relative to its own mean, so metrics
on different scales can sit next to each other.
"""
from __future__ import annotations

import logging
from typing import Sequence

import altair as alt
import numpy as np
import pandas as pd

from wpa_analytics.aggregate.summarise import (
    apply_privacy_threshold,
    employee_counts,
    extract_date_range,
    group_averages,
    person_averages,
    resolve_hrvar,
    resolve_mingroup,
)
from wpa_analytics.charts import chart_title
from wpa_analytics.clean.transform import camel_clean, us_to_space
from wpa_analytics.clean.validate import check_inputs, check_return

log = logging.getLogger(__name__)

KEY_METRICS = (
    "Workweek_span",
    "Collaboration_hours",
    "After_hours_collaboration_hours",
    "Meetings",
    "Meeting_hours",
    "After_hours_meeting_hours",
    "Low_quality_meeting_hours",
    "Meeting_hours_with_manager_1_on_1",
    "Meeting_hours_with_manager",
    "Emails_sent",
    "Email_hours",
    "After_hours_email_hours",
    "Generated_workload_email_hours",
    "Total_focus_hours",
    "Internal_network_size",
    "Networking_outside_organization",
    "External_network_size",
    "Networking_outside_company",
)

# ggplot-style text size is in millimetres
_PT_PER_MM = 72.27 / 25.4


def keymetrics_scan(
    data: pd.DataFrame,
    hrvar: str | None = None,
    mingroup: int | None = None,
    metrics: Sequence[str] = KEY_METRICS,
    return_: str = "plot",
    textsize: float = 2,
) -> pd.DataFrame | alt.LayerChart:
    """Average a set of key metrics per HR group.

    Args:
        data: Standard Query DataFrame.
        hrvar: HR variable to split by. Defaults to the configured `hrvar`.
        mingroup: Privacy threshold. Defaults to the configured `mingroup`.
        metrics: Columns to average. Defaults to the 18 key collaboration
            metrics in `KEY_METRICS`.
        return_: ``"plot"`` or ``"table"``.
        textsize: Label size in millimetres.

    Returns:
        With ``"table"``, a DataFrame with a `variable` column and one column
        per group, holding one row per metric plus an `Employee_Count` row.
        With ``"plot"``, a heatmap of the same values (without the count row).
    """
    hrvar = resolve_hrvar(hrvar)
    mingroup = resolve_mingroup(mingroup)
    metrics = list(metrics)
    check_inputs(data, ["PersonId", hrvar, *metrics])
    check_return(return_, ("plot", "table"))

    counts = employee_counts(data, hrvar)
    table = apply_privacy_threshold(
        group_averages(person_averages(data, hrvar, metrics), metrics),
        counts,
        mingroup,
    )

    if return_ == "table":
        wide = table.set_index("group")[[*metrics, "Employee_Count"]].T
        wide.columns.name = None
        return wide.rename_axis("variable").reset_index()

    if table.empty:
        log.warning("No group passed the privacy threshold; chart will be empty")

    long = table.melt(id_vars=["group"], value_vars=metrics, var_name="variable", value_name="value")
    row_mean = long.groupby("variable")["value"].transform("mean")
    long["value_rescaled"] = np.where(row_mean != 0, long["value"] / row_mean, np.nan)
    long["variable"] = long["variable"].map(us_to_space)
    long["group"] = long["group"].astype(str)

    base = alt.Chart(long).encode(
        x=alt.X("group:N", title=None, axis=alt.Axis(orient="top", labelAngle=-90)),
        y=alt.Y("variable:N", sort=[us_to_space(m) for m in metrics], title=None),
    )
    tiles = base.mark_rect().encode(
        color=alt.Color("value_rescaled:Q", scale=alt.Scale(scheme="blues"), legend=None),
        tooltip=["group:N", "variable:N", alt.Tooltip("value:Q", format=".1f")],
    )
    labels = base.mark_text(fontSize=textsize * _PT_PER_MM).encode(
        text=alt.Text("value:Q", format=".1f"),
    )

    return alt.layer(tiles, labels).properties(
        title=chart_title(
            "Key Workplace Analytics metrics",
            f"Weekly average by {camel_clean(hrvar)}",
            extract_date_range(data, return_="text") if "Date" in data.columns else None,
        ),
    )
