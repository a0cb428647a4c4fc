"""wpa_analytics package.

Analytics functions over Standard Query workplace-collaboration data (one row
per person per day). Each function groups by an HR variable such as
`Organization` or `LevelDesignation` and returns a summary table or an
altair chart.

Architecture:
- `clean`: column checks, output-mode checks, date parsing, labels
- `aggregate`: person -> group means, employee counts, privacy threshold
- `analyses`: the public analytics built on the two layers above
- Pydantic models validate the small scalar summaries
"""

from wpa_analytics.aggregate.summarise import extract_date_range, hrvar_count
from wpa_analytics.analyses import (
    KEY_METRICS,
    collaboration_sum,
    create_bar,
    create_stacked,
    email_sum,
    identify_tenure,
    keymetrics_scan,
    meeting_sum,
)
from wpa_analytics.clean.validate import InvalidReturnError, MissingColumnsError, WpaInputError

__all__ = [
    "KEY_METRICS",
    "InvalidReturnError",
    "MissingColumnsError",
    "WpaInputError",
    "__version__",
    "collaboration_sum",
    "create_bar",
    "create_stacked",
    "email_sum",
    "extract_date_range",
    "hrvar_count",
    "identify_tenure",
    "keymetrics_scan",
    "meeting_sum",
]
__version__ = "0.1.0"
