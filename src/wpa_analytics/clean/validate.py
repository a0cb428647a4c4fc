"""Precondition checks for Standard Query inputs.

Every analytic calls `check_inputs` before touching the data and
`check_return` before building its output. Both raise subclasses of
`WpaInputError`, which is a `ValueError`.
"""
from __future__ import annotations

from typing import Iterable, Sequence

import pandas as pd


class WpaInputError(ValueError):
    """Base class for invalid arguments passed to an analytic."""


class MissingColumnsError(WpaInputError):
    """Raised when required columns are absent from the input data."""

    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = list(missing)
        names = ", ".join(f"`{c}`" for c in self.missing)
        super().__init__(
            f"The following required variables are not present in the data: {names}"
        )


class InvalidReturnError(WpaInputError):
    """Raised when an unknown output mode is requested."""

    def __init__(self, value: object, valid: Sequence[str]) -> None:
        self.value = value
        self.valid = list(valid)
        options = ", ".join(f"'{v}'" for v in self.valid)
        super().__init__(
            f"Please enter a valid input for `return_`: got {value!r}, expected one of {options}."
        )


def check_inputs(data: pd.DataFrame, requirements: Iterable[str]) -> None:
    """Raise `MissingColumnsError` if any required column is missing.

    Duplicate requirements are reported once, in the order given.

    Args:
        data: Standard Query DataFrame.
        requirements: Column names that must be present.
    """
    missing: list[str] = []
    for col in requirements:
        if col not in data.columns and col not in missing:
            missing.append(col)
    if missing:
        raise MissingColumnsError(missing)


def check_return(value: str, valid: Sequence[str]) -> str:
    """Return `value` unchanged if it is one of `valid`, else raise."""
    if value not in valid:
        raise InvalidReturnError(value, valid)
    return value
