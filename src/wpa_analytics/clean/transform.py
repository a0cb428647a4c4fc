"""Cleaning and normalization utilities.

Standard Query exports carry dates as `%m/%d/%Y` strings and HR variables
under arbitrary column names. The helpers here turn those into a stable
shape (`datetime64` dates, a `group` column) for the aggregation steps.
"""
from __future__ import annotations

import logging
import re

import pandas as pd

log = logging.getLogger(__name__)

SQ_DATE_FORMAT = "%m/%d/%Y"

_CAMEL_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def parse_dates(values: pd.Series) -> pd.Series:
    """Convert a date column to midnight-normalized `datetime64` values.

    Strings are read with the Standard Query format first; anything that does
    not match falls back to pandas' own parsing.
    """
    if pd.api.types.is_datetime64_any_dtype(values):
        return values.dt.normalize()
    try:
        parsed = pd.to_datetime(values, format=SQ_DATE_FORMAT)
    except (ValueError, TypeError):
        log.debug("Column %s is not in %s form, using inferred parsing", values.name, SQ_DATE_FORMAT)
        parsed = pd.to_datetime(values)
    return parsed.dt.normalize()


def rename_group(data: pd.DataFrame, hrvar: str) -> pd.DataFrame:
    """Return a copy of `data` with `hrvar` renamed to `group`.

    An unrelated column already called `group` is dropped first.
    """
    if hrvar == "group":
        return data.copy()
    if "group" in data.columns:
        data = data.drop(columns="group")
    return data.rename(columns={hrvar: "group"})


def us_to_space(name: str) -> str:
    """Underscore to space: ``"Meeting_hours"`` -> ``"Meeting hours"``."""
    return name.replace("_", " ")


def camel_clean(name: str) -> str:
    """Split a CamelCase HR variable name into words.

    ``"LevelDesignation"`` becomes ``"Level Designation"`` and
    ``"HR_Org"`` becomes ``"HR Org"``.
    """
    spaced = _CAMEL_RE.sub(" ", us_to_space(name))
    return re.sub(r"\s+", " ", spaced).strip()
