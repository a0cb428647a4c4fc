"""Shared altair building blocks for the analytics charts.

Charts are returned unrendered so callers can display them in a notebook or
Streamlit (`st.altair_chart`) or save them with `chart.save(...)`.
"""

from __future__ import annotations

import altair as alt
import pandas as pd

BASE_COLOUR = "#1d627e"
STACK_COLOURS = ("#1d627e", "#34b1e2", "#b4d5dd", "#adc0cb")
TITLE_COLOUR = "#5d5d5d"


def chart_title(
    title: str,
    subtitle: str | None = None,
    caption: str | None = None,
) -> alt.TitleParams:
    """Left-anchored title with optional subtitle and caption lines."""
    lines = [s for s in (subtitle, caption) if s]
    return alt.TitleParams(
        text=title,
        subtitle=lines,
        anchor="start",
        color=TITLE_COLOUR,
        fontSize=16,
        subtitleFontSize=11,
    )


def count_annotations(
    counts: pd.DataFrame,
    order: list[str],
    location: float,
) -> alt.LayerChart:
    """Shaded band to the right of horizontal bars holding ``n= <count>``.

    Args:
        counts: DataFrame with `group` (as strings) and `Employee_Count`.
        order: Group order used on the y axis of the bars.
        location: Largest bar value; the band spans 1.05x to 1.25x of it.
    """
    ann = counts.assign(
        band_start=location * 1.05,
        band_end=location * 1.25,
        label_x=location * 1.15,
        label=counts["Employee_Count"].map(lambda n: f"n= {n}"),
    )
    y = alt.Y("group:N", sort=order, title=None)
    band = (
        alt.Chart(ann)
        .mark_rect(color="grey", opacity=0.2)
        .encode(x="band_start:Q", x2="band_end:Q", y=y)
    )
    text = (
        alt.Chart(ann)
        .mark_text()
        .encode(x="label_x:Q", y=y, text="label:N")
    )
    return band + text
