"""Grouped analytics over Standard Query data.

Each function validates its inputs, aggregates per person then per HR group,
drops groups below the privacy threshold, and returns either a table or an
altair chart depending on `return_`.
"""

from wpa_analytics.analyses.bar import create_bar, email_sum, meeting_sum
from wpa_analytics.analyses.keymetrics import KEY_METRICS, keymetrics_scan
from wpa_analytics.analyses.stacked import collaboration_sum, create_stacked
from wpa_analytics.analyses.tenure import identify_tenure

__all__ = [
    "KEY_METRICS",
    "collaboration_sum",
    "create_bar",
    "create_stacked",
    "email_sum",
    "identify_tenure",
    "keymetrics_scan",
    "meeting_sum",
]
