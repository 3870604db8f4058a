"""
Reverse coding of item responses.

A response ``v`` on an item with possible range [min, max] becomes
``min + max - v``.  Missing responses stay missing.
"""

from __future__ import annotations

import pandas as pd

from .errors import SelectionError
from .selection import AllFlag, ByPosition, ItemSpec, Unspecified


def revcode(values, item_min: float, item_max: float):
    """
    Reverse code a scalar, numpy array, or pandas Series.

    No range check is made here; the engine checks observed values
    against the response range before calling this.

    Examples:
        >>> revcode(1, 0, 4)
        3
        >>> revcode(pd.Series([1, None, 5]), 1, 5).tolist()
        [5.0, nan, 1.0]
    """
    return item_min + item_max - values


def resolve_reverse_columns(
    df: pd.DataFrame,
    items_df: pd.DataFrame,
    spec: ItemSpec,
) -> list:
    """
    Resolve a reverse-item specification into item column labels.

    Names are looked up directly.  Positions use the same addressing as the
    ``items`` argument, so they are resolved against the ORIGINAL table
    ``df`` rather than the narrowed ``items_df``.

    Args:
        df: Original response table.
        items_df: The selected item columns.
        spec: Parsed ``revitems`` argument.

    Returns:
        Ordered list of item columns to reverse (empty for "none").

    Raises:
        SelectionError: A reverse item is not in the table, is not one of
                        the scored items, or is requested twice.
    """
    if isinstance(spec, Unspecified):
        return []
    if isinstance(spec, AllFlag):
        return list(items_df.columns) if spec.value else []

    if isinstance(spec, ByPosition):
        out_of_bounds = [p for p in spec.positions if p < 1 or p > df.shape[1]]
        if out_of_bounds:
            raise SelectionError(
                f"Reverse item position(s) {out_of_bounds} out of bounds; the "
                f"data has {df.shape[1]} column(s) (positions are 1-based)."
            )
        requested = [df.columns[p - 1] for p in spec.positions]
    else:
        requested = list(spec.names)

    not_items = [col for col in requested if col not in items_df.columns]
    if not_items:
        raise SelectionError(
            f"Reverse item(s) {not_items} are not among the items being scored: "
            f"{list(items_df.columns)}"
        )
    duplicated = sorted({str(c) for c in requested if requested.count(c) > 1})
    if duplicated:
        raise SelectionError(f"Reverse item(s) selected more than once: {duplicated}")
    return requested


def reverse_items(
    items_df: pd.DataFrame,
    columns: list,
    minmax: tuple[float, float],
) -> pd.DataFrame:
    """Return a copy of ``items_df`` with ``columns`` reverse coded."""
    result = items_df.copy()
    item_min, item_max = minmax
    for col in columns:
        result[col] = revcode(result[col], item_min, item_max)
    return result
