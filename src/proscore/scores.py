"""
Score computation and the missing-data cutoff.

Scores use only each respondent's non-missing items:

- mean:       mean of the non-missing item values
- sum:        mean * itemCount, i.e. the sum prorated to the full item
              count.  This is the intended missing-data handling, not a
              literal sum of the observed values.
- pomp/100:   the mean rescaled from [min, max] to [0, 100]

A respondent with no valid items gets NaN for every score type.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from .config import POMP_MAX, POMP_MIN, RESCALED_TYPES
from .errors import ParameterError


def rerange(
    values,
    item_min: float,
    item_max: float,
    new_min: float = POMP_MIN,
    new_max: float = POMP_MAX,
):
    """
    Linearly map ``values`` from [item_min, item_max] to [new_min, new_max].

    Works on scalars, numpy arrays, and pandas Series; NaN passes through.
    """
    return (values - item_min) / (item_max - item_min) * (new_max - new_min) + new_min


def mean_scores(items_df: pd.DataFrame) -> pd.Series:
    """Row means over non-missing items; NaN where a row has no valid items."""
    values = items_df.to_numpy(dtype="float64")
    valid = ~np.isnan(values)
    n_valid = valid.sum(axis=1)
    totals = np.where(valid, values, 0.0).sum(axis=1)

    means = np.full(len(items_df), np.nan)
    np.divide(totals, n_valid, out=means, where=n_valid > 0)
    return pd.Series(means, index=items_df.index, dtype="float64")


def compute_scores(
    items_df: pd.DataFrame,
    score_type: str,
    minmax: tuple[float, float] | None = None,
) -> pd.Series:
    """
    Compute one score per respondent.

    Args:
        items_df: Float item table, already reverse coded where needed.
        score_type: One of "pomp", "100", "sum", "mean".
        minmax: Response range; required for "pomp" and "100".

    Returns:
        Series of scores aligned with ``items_df.index``.
    """
    means = mean_scores(items_df)

    if score_type == "mean":
        return means
    if score_type == "sum":
        return means * items_df.shape[1]
    if score_type in RESCALED_TYPES:
        if minmax is None:
            raise ParameterError(f"minmax is required for score type {score_type!r}")
        return rerange(means, minmax[0], minmax[1])
    raise ParameterError(f"Unknown score type: {score_type!r}")


def apply_missing_cutoff(
    scores: pd.Series,
    pmiss: pd.Series,
    okmiss: float,
) -> pd.Series:
    """
    Set the score to NaN for every respondent whose proportion of missing
    items is strictly greater than ``okmiss``.  A respondent exactly at the
    cutoff keeps their score.
    """
    gated = scores.copy()
    gated[pmiss > okmiss] = np.nan
    return gated
