"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads the analytics defaults (privacy threshold, tenure ceiling, default HR
variable) from the environment.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os

from dotenv import load_dotenv

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")

DEFAULT_MINGROUP = 5
DEFAULT_MAXTEN = 40
DEFAULT_HRVAR = "Organization"


@dataclass(frozen=True)
class Settings:
    """Container for analytics defaults read from the environment.

    Attributes:
        mingroup: Privacy threshold, the minimum number of distinct people a
            group needs before it is shown.
        maxten: Tenure in years at or above which a person is flagged.
        hrvar: HR variable used for grouping when none is given.
        log_path: Optional file that logs are also written to.
    """
    mingroup: int
    maxten: int
    hrvar: str
    log_path: Path | None


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}.") from None
    if value < 1:
        raise RuntimeError(f"{name} must be a positive integer, got {value}.")
    return value


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if `WPA_MINGROUP` or `WPA_MAXTEN` is not a positive
            integer, or `WPA_HRVAR` is set to an empty string.
    """
    mingroup = _positive_int("WPA_MINGROUP", DEFAULT_MINGROUP)
    maxten = _positive_int("WPA_MAXTEN", DEFAULT_MAXTEN)
    hrvar = os.getenv("WPA_HRVAR", DEFAULT_HRVAR).strip()
    log_path_raw = os.getenv("WPA_LOG_PATH", "").strip()

    if not hrvar:
        raise RuntimeError(
            "WPA_HRVAR is set but empty. Unset it or name an HR column "
            "(example: 'LevelDesignation')."
        )

    return Settings(
        mingroup=mingroup,
        maxten=maxten,
        hrvar=hrvar,
        log_path=Path(log_path_raw) if log_path_raw else None,
    )
