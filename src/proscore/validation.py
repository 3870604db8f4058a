"""
Input validation for scale scoring.

Every check here runs before any score is computed, so a bad call never
produces partial output.  Checks raise on failure and otherwise return the
(possibly normalized) value they were given.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from numbers import Real

import numpy as np
import pandas as pd

from .config import RESCALED_TYPES, SCORE_TYPES
from .errors import ParameterError, RangeError, StructuralError


# ---------------------------------------------------------------------------
# Table structure
# ---------------------------------------------------------------------------

def _rows_to_frame(rows: Sequence) -> pd.DataFrame:
    """Build a DataFrame from row mappings, requiring identical keys in every row."""
    if not rows:
        raise StructuralError("Response table has no rows and no columns.")
    if not all(isinstance(row, Mapping) for row in rows):
        raise StructuralError("Every row of the response table must be a mapping of column to value.")

    header = list(rows[0].keys())
    for i, row in enumerate(rows[1:], start=2):
        if list(row.keys()) != header:
            raise StructuralError(
                f"Response table is not rectangular: row {i} has columns "
                f"{list(row.keys())}, expected {header}."
            )
    return pd.DataFrame.from_records(list(rows), columns=header)


def check_table(df) -> pd.DataFrame:
    """
    Confirm the response table is a usable rectangular table.

    Args:
        df: A DataFrame, or a list/tuple of row mappings sharing the same keys.

    Returns:
        The table as a DataFrame (the caller's object when one was given).

    Raises:
        StructuralError: Not a table, not rectangular, no columns, or
                         duplicated column labels.
    """
    if isinstance(df, (list, tuple)):
        df = _rows_to_frame(df)
    elif not isinstance(df, pd.DataFrame):
        raise StructuralError(
            f"Response table must be a pandas DataFrame, got {type(df).__name__}."
        )

    if df.shape[1] == 0:
        raise StructuralError("Response table has no columns.")

    duplicated = df.columns[df.columns.duplicated()].unique().tolist()
    if duplicated:
        raise StructuralError(f"Response table has duplicated column labels: {duplicated}")

    return df


def check_items_numeric(items_df: pd.DataFrame) -> pd.DataFrame:
    """
    Confirm every item column holds only numbers or missing markers.

    Object columns (e.g. numbers mixed with ``None``) are accepted when each
    present value is a real number.  Booleans and text are rejected.

    Returns:
        Float copy of ``items_df`` with missing markers as NaN.

    Raises:
        StructuralError: Names every non-numeric item column.
    """
    bad_columns = []
    for col in items_df.columns:
        series = items_df[col]
        if pd.api.types.is_bool_dtype(series):
            bad_columns.append(col)
        elif pd.api.types.is_numeric_dtype(series):
            continue
        else:
            present = series.dropna()
            if not all(
                isinstance(v, (Real, np.number)) and not isinstance(v, (bool, np.bool_))
                for v in present
            ):
                bad_columns.append(col)

    if bad_columns:
        raise StructuralError(
            f"Item column(s) must contain only numbers or missing values: {bad_columns}"
        )

    return pd.DataFrame(
        {col: items_df[col].to_numpy(dtype="float64", na_value=np.nan) for col in items_df.columns},
        index=items_df.index,
        columns=items_df.columns,
    )


# ---------------------------------------------------------------------------
# Parameters
# ---------------------------------------------------------------------------

def check_okmiss(okmiss) -> float:
    """Missing-item tolerance must be a real number in [0, 1]."""
    if isinstance(okmiss, (bool, np.bool_)) or not isinstance(okmiss, (Real, np.number)):
        raise ParameterError(f"okmiss must be a number between 0 and 1, got {okmiss!r}.")
    if not 0 <= okmiss <= 1:
        raise ParameterError(f"okmiss must be between 0 and 1, got {okmiss}.")
    return float(okmiss)


def check_score_type(score_type) -> str:
    if score_type not in SCORE_TYPES:
        raise ParameterError(
            f"Unrecognized score type {score_type!r}; expected one of {list(SCORE_TYPES)}."
        )
    return score_type


def check_minmax(
    minmax,
    score_type: str,
    reversing: bool,
) -> tuple[float, float] | None:
    """
    Validate the response range and enforce when it is required.

    A range is required for the rescaled types ("pomp", "100") and whenever
    any item is to be reverse coded.

    Args:
        minmax: ``(item_min, item_max)`` or None.
        score_type: Already-validated score type.
        reversing: Whether any item is designated for reverse coding.

    Returns:
        ``(float(min), float(max))``, or None when no range was given and
        none is required.

    Raises:
        ParameterError: Range missing but required, not a pair of finite
                        numbers, or min >= max.
    """
    if minmax is None:
        if score_type in RESCALED_TYPES:
            raise ParameterError(
                f"minmax (the minimum and maximum possible item responses) is "
                f"required when type is {score_type!r}."
            )
        if reversing:
            raise ParameterError("minmax is required when reverse coding items (revitems).")
        return None

    if isinstance(minmax, (str, bytes)) or not hasattr(minmax, "__len__") or len(minmax) != 2:
        raise ParameterError(f"minmax must be a pair (item_min, item_max), got {minmax!r}.")

    # iterate rather than index so labelled Series ranges work
    lo, hi = list(minmax)
    for bound in (lo, hi):
        if (
            isinstance(bound, (bool, np.bool_))
            or not isinstance(bound, (Real, np.number))
            or not math.isfinite(bound)
        ):
            raise ParameterError(f"minmax must hold two finite numbers, got {minmax!r}.")
    if lo >= hi:
        raise ParameterError(f"minmax minimum must be less than maximum, got {minmax!r}.")

    return float(lo), float(hi)


# ---------------------------------------------------------------------------
# Observed values
# ---------------------------------------------------------------------------

def check_item_range(items_df: pd.DataFrame, minmax: tuple[float, float]) -> None:
    """
    Confirm every present item value lies within the response range.

    Values are never clamped; an out-of-range value means the declared
    range (or the data) is wrong.

    Raises:
        RangeError: Names each offending item with its observed min and max.
    """
    lo, hi = minmax
    offenders = []
    for col in items_df.columns:
        observed = items_df[col].dropna()
        if observed.empty:
            continue
        col_min, col_max = observed.min(), observed.max()
        if col_min < lo or col_max > hi:
            offenders.append(f"{col} (observed {col_min:g} to {col_max:g})")

    if offenders:
        raise RangeError(
            f"Item values outside minmax [{lo:g}, {hi:g}]: {', '.join(offenders)}"
        )
