"""
Per-respondent missing-item tallies.
"""

from __future__ import annotations

import pandas as pd

from .config import TALLY_KINDS
from .errors import ParameterError


def miss_tally(items_df: pd.DataFrame, what: str = "pmiss") -> pd.Series:
    """
    Count or proportion of missing (or valid) items for each respondent.

    ``itemCount`` is the number of item columns, identical for every row.

    Args:
        items_df: Item columns only.
        what: One of
              - "pmiss":  proportion missing, (itemCount - nvalid) / itemCount
              - "nmiss":  number missing
              - "nvalid": number of non-missing items
              - "pvalid": proportion non-missing

    Returns:
        Series aligned with ``items_df.index``.

    Raises:
        ParameterError: Unknown ``what``.
    """
    if what not in TALLY_KINDS:
        raise ParameterError(f"Unknown tally {what!r}; expected one of {list(TALLY_KINDS)}.")

    n_items = items_df.shape[1]
    n_valid = items_df.notna().sum(axis=1).astype("int64")

    if what == "nvalid":
        return n_valid
    if what == "nmiss":
        return n_items - n_valid
    if what == "pvalid":
        return n_valid / n_items
    return (n_items - n_valid) / n_items
