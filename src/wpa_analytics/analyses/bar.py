"""Single-metric averages per HR group."""
from __future__ import annotations

import logging

import altair as alt
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
from wpa_analytics.charts import BASE_COLOUR, chart_title, count_annotations
from wpa_analytics.clean.transform import camel_clean, us_to_space
from wpa_analytics.clean.validate import check_inputs, check_return

log = logging.getLogger(__name__)


def create_bar(
    data: pd.DataFrame,
    metric: str,
    hrvar: str | None = None,
    mingroup: int | None = None,
    return_: str = "plot",
    bar_colour: str = BASE_COLOUR,
) -> pd.DataFrame | alt.LayerChart:
    """Average of one metric per HR group.

    Args:
        data: Standard Query DataFrame.
        metric: Numeric column to average.
        hrvar: HR variable to split by. Defaults to the configured `hrvar`.
        mingroup: Privacy threshold. Defaults to the configured `mingroup`.
        return_: ``"plot"`` or ``"table"``.
        bar_colour: Fill colour of the bars.

    Returns:
        Table with `group`, `<metric>` and `Employee_Count`, or a horizontal
        bar chart ordered by the metric.
    """
    hrvar = resolve_hrvar(hrvar)
    mingroup = resolve_mingroup(mingroup)
    check_inputs(data, ["Date", metric, "PersonId", hrvar])
    check_return(return_, ("plot", "table"))

    counts = employee_counts(data, hrvar)
    people = apply_privacy_threshold(person_averages(data, hrvar, [metric]), counts, mingroup)
    table = group_averages(people, [metric]).merge(counts, on="group", how="left")

    if return_ == "table":
        return table

    plot_df = table.assign(group=table["group"].astype(str), label=table[metric].round(1))
    order = plot_df.sort_values(metric, ascending=False, kind="mergesort")["group"].tolist()
    location = float(plot_df[metric].max()) if plot_df[metric].notna().any() else 0.0
    if plot_df.empty:
        log.warning("No group passed the privacy threshold; chart will be empty")
    x_scale = alt.Scale(domain=[0, location * 1.25]) if location > 0 else alt.Scale()
    y = alt.Y("group:N", sort=order, title=hrvar)

    bars = (
        alt.Chart(plot_df)
        .mark_bar(color=bar_colour)
        .encode(
            x=alt.X(f"{metric}:Q", scale=x_scale, title=f"Average {us_to_space(metric)}"),
            y=y,
            tooltip=["group:N", alt.Tooltip(f"{metric}:Q", format=".1f"), "Employee_Count:Q"],
        )
    )
    labels = bars.mark_text(align="left", dx=4).encode(text="label:Q")
    annotations = count_annotations(plot_df[["group", "Employee_Count"]], order, location)

    return alt.layer(bars, labels, annotations).properties(
        title=chart_title(
            us_to_space(metric),
            f"Average {us_to_space(metric)} by {camel_clean(hrvar)}",
            extract_date_range(data, return_="text"),
        ),
    )


def meeting_sum(
    data: pd.DataFrame,
    hrvar: str | None = None,
    mingroup: int | None = None,
    return_: str = "plot",
) -> pd.DataFrame | alt.LayerChart:
    """Weekly meeting hours per HR group."""
    return create_bar(data, metric="Meeting_hours", hrvar=hrvar, mingroup=mingroup, return_=return_)


def email_sum(
    data: pd.DataFrame,
    hrvar: str | None = None,
    mingroup: int | None = None,
    return_: str = "plot",
) -> pd.DataFrame | alt.LayerChart:
    """Weekly email hours per HR group."""
    return create_bar(data, metric="Email_hours", hrvar=hrvar, mingroup=mingroup, return_=return_)
