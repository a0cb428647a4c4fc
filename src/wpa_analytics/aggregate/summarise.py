"""Grouped aggregation steps shared by every analytic.

The analytics all run the same pipeline over a Standard Query DataFrame:

1. average each metric per person (`person_averages`)
2. average across people in each HR group (`group_averages`)
3. join distinct-person counts per group (`employee_counts`)
4. drop groups below the privacy threshold (`apply_privacy_threshold`)

Means skip missing values. Counts are distinct `PersonId` values over the
whole input, so duplicated person-day rows never change a result.
"""
from __future__ import annotations

import logging
from typing import Sequence

import altair as alt
import pandas as pd

from wpa_analytics.charts import BASE_COLOUR, chart_title
from wpa_analytics.clean.transform import camel_clean, parse_dates, rename_group
from wpa_analytics.clean.validate import WpaInputError, check_inputs, check_return
from wpa_analytics.config import get_settings
from wpa_analytics.models import DateRange

log = logging.getLogger(__name__)


def resolve_mingroup(mingroup: int | None) -> int:
    """Return `mingroup`, or the configured privacy threshold when it is None.

    Raises:
        WpaInputError: if an explicit `mingroup` is below 1.
    """
    if mingroup is None:
        return get_settings().mingroup
    if int(mingroup) < 1:
        raise WpaInputError(f"`mingroup` must be a positive integer, got {mingroup}.")
    return int(mingroup)


def resolve_hrvar(hrvar: str | None) -> str:
    """Return `hrvar`, or the configured default HR variable when it is None."""
    if hrvar is None:
        return get_settings().hrvar
    return hrvar


def employee_counts(data: pd.DataFrame, hrvar: str) -> pd.DataFrame:
    """Return distinct people per HR group.

    Returns:
        DataFrame with columns: `group`, `Employee_Count`.
    """
    return (
        rename_group(data, hrvar)
        .groupby("group")["PersonId"]
        .nunique()
        .reset_index(name="Employee_Count")
    )


def person_averages(
    data: pd.DataFrame,
    hrvar: str,
    metrics: Sequence[str],
) -> pd.DataFrame:
    """Average each metric per person within their HR group.

    Returns:
        DataFrame with columns `PersonId`, `group` and one column per metric.
    """
    metrics = list(metrics)
    return (
        rename_group(data, hrvar)[["PersonId", "group", *metrics]]
        .groupby(["PersonId", "group"])[metrics]
        .mean()
        .reset_index()
    )


def group_averages(person_table: pd.DataFrame, metrics: Sequence[str]) -> pd.DataFrame:
    """Average person-level metrics across people in each group."""
    metrics = list(metrics)
    return person_table.groupby("group")[metrics].mean().reset_index()


def apply_privacy_threshold(
    table: pd.DataFrame,
    counts: pd.DataFrame,
    mingroup: int,
) -> pd.DataFrame:
    """Join `Employee_Count` onto `table` and drop groups below `mingroup`.

    Args:
        table: Any DataFrame with a `group` column (person- or group-level).
        counts: Output of `employee_counts`.
        mingroup: Minimum number of distinct people a group needs.

    Returns:
        `table` with an `Employee_Count` column, restricted to groups with at
        least `mingroup` people and sorted by `group`.
    """
    out = table.merge(counts, on="group", how="left")
    keep = out["Employee_Count"] >= mingroup

    suppressed = counts.loc[counts["Employee_Count"] < mingroup, "group"]
    if len(suppressed) > 0:
        log.info(
            "Suppressed %d group(s) with fewer than %d employees",
            len(suppressed),
            mingroup,
        )

    sort_cols = ["group", "PersonId"] if "PersonId" in out.columns else ["group"]
    return out[keep].sort_values(sort_cols, kind="mergesort").reset_index(drop=True)


def hrvar_count(
    data: pd.DataFrame,
    hrvar: str | None = None,
    return_: str = "plot",
) -> pd.DataFrame | alt.LayerChart:
    """Count distinct people in each group of an HR variable.

    No privacy threshold is applied: the counts are what the threshold is
    checked against.

    Args:
        data: Standard Query DataFrame.
        hrvar: HR variable to count by. Defaults to the configured `hrvar`.
        return_: ``"table"`` or ``"plot"``.

    Returns:
        Table with columns `<hrvar>` and `n`, largest group first, or a bar
        chart of the same.
    """
    hrvar = resolve_hrvar(hrvar)
    check_inputs(data, ["PersonId", hrvar])
    check_return(return_, ("plot", "table"))

    table = (
        data.groupby(hrvar)["PersonId"]
        .nunique()
        .reset_index(name="n")
        .sort_values(["n", hrvar], ascending=[False, True], kind="mergesort")
        .reset_index(drop=True)
    )
    if return_ == "table":
        return table

    plot_df = table.assign(**{hrvar: table[hrvar].astype(str)})
    bars = (
        alt.Chart(plot_df)
        .mark_bar(color=BASE_COLOUR)
        .encode(
            x=alt.X(f"{hrvar}:N", sort=list(plot_df[hrvar]), title=camel_clean(hrvar)),
            y=alt.Y("n:Q", title="Number of employees"),
            tooltip=[f"{hrvar}:N", "n:Q"],
        )
    )
    labels = bars.mark_text(dy=-6).encode(text="n:Q")
    return (bars + labels).properties(
        title=chart_title(f"People by {camel_clean(hrvar)}"),
    )


def extract_date_range(data: pd.DataFrame, return_: str = "table") -> pd.DataFrame | str:
    """Return the first and last `Date` in the data.

    Args:
        data: Standard Query DataFrame.
        return_: ``"table"`` for a one-row `Start`/`End` DataFrame, ``"text"``
            for the caption used under charts.
    """
    check_inputs(data, ["Date"])
    check_return(return_, ("table", "text"))

    dates = parse_dates(data["Date"]).dropna()
    if dates.empty:
        raise ValueError("`Date` has no parseable values.")
    date_range = DateRange(start=dates.min().date(), end=dates.max().date())

    if return_ == "text":
        return date_range.caption()
    return pd.DataFrame({"Start": [date_range.start], "End": [date_range.end]})
