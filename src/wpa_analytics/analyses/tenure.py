"""Tenure check based on hire dates.

Tenure is measured at a single snapshot: the latest value of the end-date
column. Only rows whose `Date` falls on that snapshot are used, so each
person contributes one tenure value.
"""
from __future__ import annotations

import logging

import altair as alt
import numpy as np
import pandas as pd

from wpa_analytics.charts import BASE_COLOUR, chart_title
from wpa_analytics.clean.transform import parse_dates
from wpa_analytics.clean.validate import check_inputs, check_return
from wpa_analytics.config import get_settings
from wpa_analytics.models import TenureSummary

log = logging.getLogger(__name__)

DAYS_PER_YEAR = 365

TENURE_RETURNS = ("message", "text", "summary", "plot", "data_cleaned", "data_dirty", "data")


def _tenure_at_snapshot(data: pd.DataFrame, end_date: str, beg_date: str) -> pd.DataFrame:
    """Return `PersonId` and `TenureYear` for rows on the latest snapshot date."""
    dates = parse_dates(data["Date"])
    ends = dates if end_date == "Date" else parse_dates(data[end_date])
    hires = parse_dates(data[beg_date])

    last_date = ends.max()
    if pd.isna(last_date):
        raise ValueError(f"`{end_date}` has no parseable values.")

    on_snapshot = dates == last_date
    snapshot = pd.DataFrame(
        {
            "PersonId": data.loc[on_snapshot, "PersonId"].to_numpy(),
            "TenureYear": ((dates[on_snapshot] - hires[on_snapshot]).dt.days / DAYS_PER_YEAR).to_numpy(),
        }
    )
    # one value per person even if the snapshot day is duplicated
    snapshot = snapshot.drop_duplicates().sort_values("PersonId", kind="mergesort").reset_index(drop=True)
    log.debug("Tenure snapshot %s: %d people", last_date.date(), snapshot["PersonId"].nunique())
    return snapshot


def _summarise(snapshot: pd.DataFrame, maxten: int) -> TenureSummary:
    years = snapshot["TenureYear"].dropna()
    if years.empty:
        raise ValueError("No tenure values could be computed at the snapshot date.")
    return TenureSummary(
        mean_tenure=float(np.mean(years)),
        max_tenure=float(np.max(years)),
        n_over_max=int(snapshot.loc[snapshot["TenureYear"] >= maxten, "PersonId"].nunique()),
        maxten=maxten,
    )


def identify_tenure(
    data: pd.DataFrame,
    end_date: str = "Date",
    beg_date: str = "HireDate",
    maxten: int | None = None,
    return_: str = "message",
) -> str | TenureSummary | pd.DataFrame | alt.Chart | None:
    """Calculate tenure from hire dates and flag implausibly long tenures.

    Args:
        data: Standard Query DataFrame with a hire date column.
        end_date: Column holding the latest date; its maximum is the snapshot.
        beg_date: Column holding the hire date.
        maxten: Tenure in years at or above which a person is flagged.
            Defaults to the configured `maxten` (40).
        return_: One of:

            - ``"message"``: log the summary text at INFO and return None.
            - ``"text"``: the summary text.
            - ``"summary"``: the `TenureSummary` model.
            - ``"plot"``: density chart of tenure in years.
            - ``"data_cleaned"``: input rows of people below `maxten`.
            - ``"data_dirty"``: input rows of people at or above `maxten`.
            - ``"data"``: `PersonId` and `TenureYear` at the snapshot.
    """
    if maxten is None:
        maxten = get_settings().maxten
    check_inputs(data, [beg_date, "PersonId", "Date", end_date])
    check_return(return_, TENURE_RETURNS)

    snapshot = _tenure_at_snapshot(data, end_date, beg_date)

    if return_ == "data":
        return snapshot

    if return_ in ("data_cleaned", "data_dirty"):
        odd_people = snapshot.loc[snapshot["TenureYear"] >= maxten, "PersonId"].unique()
        flagged = data["PersonId"].isin(odd_people)
        rows = data[~flagged] if return_ == "data_cleaned" else data[flagged]
        return rows.reset_index(drop=True)

    if return_ == "plot":
        return (
            alt.Chart(snapshot.dropna(subset=["TenureYear"]))
            .transform_density("TenureYear", as_=["TenureYear", "density"])
            .mark_area(color=BASE_COLOUR, opacity=0.6, line=True)
            .encode(
                x=alt.X("TenureYear:Q", title="Tenure in Years"),
                y=alt.Y("density:Q", title="Density - number of employees"),
            )
            .properties(title=chart_title("Tenure - Density", f"Calculated with `{beg_date}`"))
        )

    summary = _summarise(snapshot, maxten)
    if return_ == "summary":
        return summary
    if return_ == "text":
        return summary.message()

    log.info(summary.message())
    return None
