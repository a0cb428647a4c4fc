"""Stacked totals of several hour metrics per HR group.

The typical use is comparing definitions of collaboration hours: each metric
becomes one segment of a horizontal bar, and `Total` is their sum per person.
"""
from __future__ import annotations

import logging
from typing import Sequence

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
from wpa_analytics.charts import STACK_COLOURS, chart_title, count_annotations
from wpa_analytics.clean.transform import camel_clean, us_to_space
from wpa_analytics.clean.validate import check_inputs, check_return

log = logging.getLogger(__name__)


def create_stacked(
    data: pd.DataFrame,
    hrvar: str | None = None,
    metrics: Sequence[str] = ("Meeting_hours", "Email_hours"),
    mingroup: int | None = None,
    return_: str = "plot",
    stack_colours: Sequence[str] = STACK_COLOURS,
    plot_title: str = "Collaboration Hours",
    plot_subtitle: str = "Weekly collaboration hours",
) -> pd.DataFrame | alt.LayerChart:
    """Sum selected metrics into a `Total` and compare it across HR groups.

    Args:
        data: Standard Query DataFrame.
        hrvar: HR variable to split by. Defaults to the configured `hrvar`
            (``"Organization"``).
        metrics: Columns summed into `Total`. Their order is the order of
            the segments in the chart.
        mingroup: Privacy threshold. Defaults to the configured `mingroup`.
        return_: ``"plot"`` or ``"table"``.
        stack_colours: Segment colours, one per metric.
        plot_title: Chart title.
        plot_subtitle: Chart subtitle; ``"by <hrvar>"`` is appended.

    Returns:
        With ``"table"``, a DataFrame with `group`, one column per metric,
        `Total` and `Employee_Count`, one row per group that passes the
        privacy threshold. With ``"plot"``, a layered altair chart.
    """
    hrvar = resolve_hrvar(hrvar)
    mingroup = resolve_mingroup(mingroup)
    metrics = list(metrics)
    if not metrics:
        raise ValueError("`metrics` must name at least one column.")

    check_inputs(data, ["Date", *metrics, "PersonId", hrvar])
    check_return(return_, ("plot", "table"))

    counts = employee_counts(data, hrvar)
    people = person_averages(data, hrvar, metrics)
    # a person with every metric missing has no Total
    people["Total"] = people[metrics].sum(axis=1, min_count=1)
    people = apply_privacy_threshold(people, counts, mingroup)

    table = group_averages(people, [*metrics, "Total"]).merge(counts, on="group", how="left")
    log.debug("create_stacked: %d group(s) by %s over %s", len(table), hrvar, metrics)

    if return_ == "table":
        return table

    return _stacked_chart(
        table,
        metrics=metrics,
        colours=list(stack_colours),
        hrvar=hrvar,
        title=plot_title,
        subtitle=f"{plot_subtitle} by {camel_clean(hrvar)}",
        caption=extract_date_range(data, return_="text"),
    )


def _stacked_chart(
    table: pd.DataFrame,
    metrics: list[str],
    colours: list[str],
    hrvar: str,
    title: str,
    subtitle: str,
    caption: str,
) -> alt.LayerChart:
    table = table.assign(group=table["group"].astype(str))
    order = table.sort_values("Total", ascending=False, kind="mergesort")["group"].tolist()
    location = float(table["Total"].max()) if table["Total"].notna().any() else 0.0
    if table.empty:
        log.warning("No group passed the privacy threshold; chart will be empty")

    rank = {m: i for i, m in enumerate(metrics)}
    long = table.melt(id_vars=["group"], value_vars=metrics, var_name="Metric", value_name="Value")
    long["metric_rank"] = long["Metric"].map(rank)
    long = long.sort_values(["group", "metric_rank"], kind="mergesort")
    # midpoint of each segment along the stack
    long["label_x"] = long.groupby("group")["Value"].cumsum() - long["Value"] / 2
    long["label"] = long["Value"].round(1)
    long["Metric"] = long["Metric"].map(us_to_space)

    x_scale = alt.Scale(domain=[0, location * 1.25]) if location > 0 else alt.Scale()
    y = alt.Y("group:N", sort=order, title=hrvar)

    bars = (
        alt.Chart(long)
        .mark_bar()
        .encode(
            x=alt.X("Value:Q", stack="zero", scale=x_scale, title="Average weekly hours"),
            y=y,
            color=alt.Color(
                "Metric:N",
                scale=alt.Scale(domain=[us_to_space(m) for m in metrics], range=colours),
                legend=alt.Legend(title=None, orient="bottom"),
            ),
            order=alt.Order("metric_rank:Q"),
            tooltip=["group:N", "Metric:N", alt.Tooltip("Value:Q", format=".1f")],
        )
    )
    labels = (
        alt.Chart(long)
        .mark_text(color="#FFFFFF", fontWeight="bold")
        .encode(x="label_x:Q", y=y, text="label:Q")
    )
    annotations = count_annotations(table[["group", "Employee_Count"]], order, location)

    return alt.layer(bars, labels, annotations).properties(
        title=chart_title(title, subtitle, caption),
    )


def collaboration_sum(
    data: pd.DataFrame,
    hrvar: str | None = None,
    mingroup: int | None = None,
    return_: str = "plot",
) -> pd.DataFrame | alt.LayerChart:
    """Weekly meeting plus email hours per HR group."""
    return create_stacked(
        data,
        hrvar=hrvar,
        metrics=("Meeting_hours", "Email_hours"),
        mingroup=mingroup,
        return_=return_,
        plot_title="Collaboration Hours",
        plot_subtitle="Weekly collaboration hours",
    )
