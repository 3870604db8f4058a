"""
Item-set specifications and item selection.

Callers may identify items by column name, by 1-based column position, by a
boolean flag (reverse items only), or not at all.  The raw argument is
parsed once into one of the small variant types below and then resolved
into a concrete, ordered list of column labels.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import Union

import numpy as np
import pandas as pd

from .errors import ParameterError, SelectionError


# ---------------------------------------------------------------------------
# Specification variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Unspecified:
    """No selection given: every column of the table is an item."""


@dataclass(frozen=True)
class ByName:
    names: tuple[str, ...]


@dataclass(frozen=True)
class ByPosition:
    """1-based column positions, in the order the caller gave them."""

    positions: tuple[int, ...]


@dataclass(frozen=True)
class AllFlag:
    """``True`` selects every item, ``False`` selects none."""

    value: bool


ItemSpec = Union[Unspecified, ByName, ByPosition, AllFlag]
_SPEC_TYPES = (Unspecified, ByName, ByPosition, AllFlag)


def _is_position(value) -> bool:
    return isinstance(value, (Integral, np.integer)) and not isinstance(value, (bool, np.bool_))


def parse_item_spec(value, allow_flag: bool = False) -> ItemSpec:
    """
    Convert a raw ``items`` / ``revitems`` argument into an ItemSpec.

    Args:
        value: None, a bool, a single name or position, or a sequence
               (list, tuple, range, pandas Index, numpy array) of names or positions.
        allow_flag: Whether a bare boolean is meaningful (True for
                    ``revitems``, False for ``items``).

    Returns:
        One of Unspecified, ByName, ByPosition, AllFlag.

    Raises:
        ParameterError: Boolean given where not allowed, or a sequence that
                        mixes names and positions (or holds anything else).
        SelectionError: An empty sequence.
    """
    if isinstance(value, _SPEC_TYPES):
        return value
    if value is None:
        return Unspecified()
    if isinstance(value, (bool, np.bool_)):
        if not allow_flag:
            raise ParameterError(
                "A boolean is not a valid item selection; give column names "
                "or 1-based column positions."
            )
        return AllFlag(bool(value))
    if isinstance(value, str):
        return ByName((value,))
    if _is_position(value):
        return ByPosition((int(value),))

    if isinstance(value, (pd.Index, pd.Series, np.ndarray)):
        values = list(value.tolist())
    elif isinstance(value, (list, tuple, range)):
        values = list(value)
    else:
        raise ParameterError(
            f"Unsupported item selection of type {type(value).__name__}; "
            "give a list of column names or 1-based column positions."
        )

    if not values:
        raise SelectionError("Item selection is empty; at least one item is required.")
    if all(isinstance(v, str) for v in values):
        return ByName(tuple(values))
    if all(_is_position(v) for v in values):
        return ByPosition(tuple(int(v) for v in values))
    raise ParameterError(
        f"Item selection must be all column names or all column positions, got {values!r}."
    )


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------

def resolve_columns(df: pd.DataFrame, spec: ItemSpec) -> list:
    """
    Resolve an ItemSpec against ``df`` into an ordered list of column labels.

    ``AllFlag(True)`` and ``Unspecified`` both mean every column;
    ``AllFlag(False)`` means none.

    Raises:
        SelectionError: Unknown names, positions outside 1..ncol, or the
                        same column requested twice.
    """
    columns = list(df.columns)

    if isinstance(spec, Unspecified):
        return columns
    if isinstance(spec, AllFlag):
        return columns if spec.value else []

    if isinstance(spec, ByName):
        absent = [name for name in spec.names if name not in df.columns]
        if absent:
            raise SelectionError(
                f"Item column(s) not found in the data: {absent}. "
                f"Available columns: {columns}"
            )
        resolved = list(spec.names)
    else:
        out_of_bounds = [p for p in spec.positions if p < 1 or p > len(columns)]
        if out_of_bounds:
            raise SelectionError(
                f"Item position(s) {out_of_bounds} out of bounds; the data "
                f"has {len(columns)} column(s) (positions are 1-based)."
            )
        resolved = [columns[p - 1] for p in spec.positions]

    duplicated = sorted({str(c) for c in resolved if resolved.count(c) > 1})
    if duplicated:
        raise SelectionError(f"Item column(s) selected more than once: {duplicated}")
    return resolved


def select_items(df: pd.DataFrame, items=None) -> pd.DataFrame:
    """
    Return a copy of ``df`` restricted to the item columns.

    Column order follows the caller's request; row order, row count, and
    the index are those of ``df``.

    Args:
        df: Response table.
        items: Raw ``items`` argument or an ItemSpec.  None keeps all columns.

    Returns:
        New DataFrame holding only the item columns.
    """
    spec = parse_item_spec(items)
    return df.loc[:, resolve_columns(df, spec)].copy()
