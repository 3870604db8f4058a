"""
Shared pytest fixtures for scale scoring tests.

The worked example used throughout: four items q1..q4 on a 0-4 response
range.  Respondent "r2" answers [4, 3, NA, 2], so nvalid = 3,
pmiss = 0.25, mean = 3.0, prorated sum = 12.0, and pomp = 75.0.
"""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest


# ---------------------------------------------------------------------------
# Response table fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def example_row_df():
    """Single respondent with one of four items missing."""
    return pd.DataFrame({"q1": [4], "q2": [3], "q3": [np.nan], "q4": [2]})


@pytest.fixture
def items_df():
    """
    Four items, five respondents with 0, 1, 2, 3, and 4 items missing.

    r1: [1, 2, 3, 4]     pmiss 0.00, mean 2.5
    r2: [4, 3, NA, 2]    pmiss 0.25, mean 3.0
    r3: [0, NA, NA, 4]   pmiss 0.50, mean 2.0
    r4: [NA, NA, 1, NA]  pmiss 0.75, mean 1.0
    r5: [NA, NA, NA, NA] pmiss 1.00, mean NaN
    """
    return pd.DataFrame(
        {
            "q1": [1, 4, 0, np.nan, np.nan],
            "q2": [2, 3, np.nan, np.nan, np.nan],
            "q3": [3, np.nan, np.nan, 1, np.nan],
            "q4": [4, 2, 4, np.nan, np.nan],
        },
        index=["r1", "r2", "r3", "r4", "r5"],
    )


@pytest.fixture
def mixed_df(items_df):
    """The items of ``items_df`` surrounded by non-item columns."""
    df = items_df.copy()
    df.insert(0, "ID", [101, 102, 103, 104, 105])
    df["group"] = ["a", "b", "a", "b", "a"]
    return df


@pytest.fixture
def complete_df():
    """Three respondents with no missing items on a 1-5 range."""
    return pd.DataFrame({
        "i1": [1, 5, 3],
        "i2": [2, 4, 3],
        "i3": [5, 5, 1],
    })


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

@pytest.fixture
def make_respondent():
    """Factory: one-respondent table with ``answered`` of ``n_items`` present."""

    def _make(n_items: int, answered: int, value: float = 2.0) -> pd.DataFrame:
        row = {
            f"q{i}": (value if i <= answered else np.nan)
            for i in range(1, n_items + 1)
        }
        return pd.DataFrame([row])

    return _make
