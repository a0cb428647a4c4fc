"""Pydantic models used for validated summary outputs.

These models define the schema of the small scalar summaries returned next
to the tabular outputs (the date range caption and the tenure check).
"""

from __future__ import annotations

from datetime import date
from pydantic import BaseModel, Field, ConfigDict, model_validator


class DateRange(BaseModel):
    """First and last `Date` covered by a Standard Query dataset."""
    model_config = ConfigDict(extra="forbid")
    start: date
    end: date

    @model_validator(mode="after")
    def _check_order(self) -> "DateRange":
        if self.end < self.start:
            raise ValueError("end must not be earlier than start")
        return self

    def caption(self, fmt: str = "%d %b %Y") -> str:
        return f"Data from {self.start.strftime(fmt)} to {self.end.strftime(fmt)}"


class TenureSummary(BaseModel):
    """Tenure check computed at the latest snapshot date.

    Attributes:
        mean_tenure: Mean tenure in years across people at the snapshot.
        max_tenure: Longest tenure in years.
        n_over_max: Number of people whose tenure is at least `maxten`.
        maxten: Threshold used for `n_over_max`.
    """
    model_config = ConfigDict(extra="forbid")
    mean_tenure: float
    max_tenure: float
    n_over_max: int = Field(..., ge=0)
    maxten: int = Field(..., ge=1)

    def message(self) -> str:
        return (
            f"The mean tenure is {round(self.mean_tenure, 1)} years.\n"
            f"The max tenure is {round(self.max_tenure, 1)}.\n"
            f"There are {self.n_over_max} employees with a tenure greater than "
            f"{self.maxten} years."
        )
