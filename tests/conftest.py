from __future__ import annotations

import pandas as pd
import pytest


@pytest.fixture
def sq_data() -> pd.DataFrame:
    """Two weeks of Standard Query rows.

    Finance has 6 people, Sales 5 and HR 2, so with the default threshold of
    5 only HR is suppressed.
    """
    people = (
        [(f"F{i}", "Finance", "Junior" if i % 2 else "Senior") for i in range(6)]
        + [(f"S{i}", "Sales", "Junior") for i in range(5)]
        + [(f"H{i}", "HR", "Senior") for i in range(2)]
    )
    rows = []
    for n, (pid, org, level) in enumerate(people):
        for week, day in enumerate(["01/05/2020", "01/12/2020"]):
            rows.append({
                "PersonId": pid,
                "Date": day,
                "Organization": org,
                "LevelDesignation": level,
                "Meeting_hours": 10.0 + n + 2 * week,
                "Email_hours": 5.0 + week,
                "HireDate": "01/12/2010",
            })
    return pd.DataFrame(rows)
