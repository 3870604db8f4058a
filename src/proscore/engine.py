"""
Scale scoring entry points.

score_scale() is the single-scale workhorse: it validates inputs, selects
and (optionally) reverse codes the items, computes the requested score
type, applies the missing-data cutoff, and returns a table aligned row for
row with the input.  score_scales() scores several subscales of one
instrument in a single call.

Pipeline order:
  validate -> select items -> reverse code -> score + tally missing
  -> missing-data cutoff -> assemble result
"""

from __future__ import annotations

from collections.abc import Mapping

import pandas as pd

from .config import (
    DEFAULT_OKMISS,
    DEFAULT_SCALENAME,
    DEFAULT_SCORE_TYPE,
    NVALID_SUFFIX,
)
from .errors import ParameterError
from .missingness import miss_tally
from .reverse import resolve_reverse_columns, reverse_items
from .scores import apply_missing_cutoff, compute_scores
from .selection import AllFlag, ItemSpec, parse_item_spec, resolve_columns
from .validation import (
    check_item_range,
    check_items_numeric,
    check_minmax,
    check_okmiss,
    check_score_type,
    check_table,
)


# ---------------------------------------------------------------------------
# Result assembly
# ---------------------------------------------------------------------------

def assemble_result(
    scores: pd.Series,
    n_valid: pd.Series,
    scalename: str = DEFAULT_SCALENAME,
    keep_nvalid: bool = False,
) -> pd.DataFrame:
    """
    Package the final scores into the output table.

    Columns are assigned directly from the aligned Series so the input
    index is kept and no row is dropped or reordered, including rows whose
    score is NaN.

    Args:
        scores: Final (gated) scores.
        n_valid: Number of valid items per respondent.
        scalename: Name of the score column.
        keep_nvalid: Also return ``<scalename>_N`` with the valid-item count.

    Returns:
        DataFrame with one row per respondent.
    """
    result = pd.DataFrame(index=scores.index)
    result[scalename] = scores.astype("float64")
    if keep_nvalid:
        result[f"{scalename}{NVALID_SUFFIX}"] = n_valid.astype("int64")
    return result


# ---------------------------------------------------------------------------
# Single scale
# ---------------------------------------------------------------------------

def _parse_revitems(revitems) -> ItemSpec:
    # None and an empty selection both mean "reverse nothing"
    if revitems is None or (
        not isinstance(revitems, (str, bytes))
        and hasattr(revitems, "__len__")
        and len(revitems) == 0
    ):
        return AllFlag(False)
    return parse_item_spec(revitems, allow_flag=True)


def score_scale(
    df,
    items=None,
    revitems=False,
    minmax=None,
    okmiss: float = DEFAULT_OKMISS,
    score_type: str = DEFAULT_SCORE_TYPE,
    scalename: str = DEFAULT_SCALENAME,
    keep_nvalid: bool = False,
    verbose: bool = False,
) -> pd.DataFrame:
    """
    Score a single patient-reported outcome (or other psychometric) scale.

    All items are assumed to share one response range.  Items with
    different ranges that also need reverse coding should be reverse coded
    by the caller (see :func:`proscore.reverse.revcode`) before scoring,
    with ``revitems`` and ``minmax`` omitted here.

    Args:
        df: Response table (DataFrame, or a list of row dicts with identical
            keys).  May contain non-item columns if ``items`` is given.
        items: Item column names, or 1-based column positions.  If omitted,
               every column of ``df`` is treated as an item.
        revitems: False/None (reverse nothing), True (reverse every item), or
                  item names / 1-based positions in ``df`` to reverse code
                  before scoring.  Anything but "nothing" requires ``minmax``.
        minmax: ``(item_min, item_max)``, the minimum and maximum possible
                item responses.  Required for "pomp"/"100" scoring and for
                reverse coding.  When given, every observed item value must
                lie within it.
        okmiss: Maximum proportion of missing items a respondent may have and
                still be scored (prorated).  Respondents above it get NaN.
        score_type: "pomp" (default) or "100" for the 0-100 rescaled mean,
                    "sum" for the prorated sum, "mean" for the item mean.
        scalename: Name of the score column in the output.
        keep_nvalid: Also return ``<scalename>_N``, the number of valid items.
        verbose: Print a short scoring summary.

    Returns:
        DataFrame with the same index as ``df`` holding ``<scalename>`` and,
        optionally, ``<scalename>_N``.

    Raises:
        StructuralError: ``df`` is not a usable table, or items are not numeric.
        ParameterError: Invalid okmiss, score_type, or minmax, or minmax
                        missing where required.
        SelectionError: Items or reverse items not found.
        RangeError: An item value lies outside ``minmax``.
    """
    # ------------------------------------------------------------------
    # Validate parameters before touching the data
    # ------------------------------------------------------------------
    df = check_table(df)
    okmiss = check_okmiss(okmiss)
    score_type = check_score_type(score_type)

    items_spec = parse_item_spec(items)
    rev_spec = _parse_revitems(revitems)
    reversing = rev_spec != AllFlag(False)
    minmax = check_minmax(minmax, score_type, reversing)

    # ------------------------------------------------------------------
    # Select items; check content and range
    # ------------------------------------------------------------------
    item_columns = resolve_columns(df, items_spec)
    items_df = check_items_numeric(df.loc[:, item_columns])
    rev_columns = resolve_reverse_columns(df, items_df, rev_spec)

    if minmax is not None:
        check_item_range(items_df, minmax)

    # ------------------------------------------------------------------
    # Reverse code, score, tally, gate
    # ------------------------------------------------------------------
    if rev_columns:
        items_df = reverse_items(items_df, rev_columns, minmax)

    scores = compute_scores(items_df, score_type, minmax)
    n_valid = miss_tally(items_df, "nvalid")
    pmiss = miss_tally(items_df, "pmiss")
    final = apply_missing_cutoff(scores, pmiss, okmiss)

    result = assemble_result(final, n_valid, scalename, keep_nvalid)

    if verbose:
        n_gated = int((pmiss > okmiss).sum())
        print(f"\nScored '{scalename}' ({score_type}):")
        print(f"  Respondents:       {len(result):,}")
        print(f"  Items:             {len(item_columns)}")
        print(f"  Reverse coded:     {len(rev_columns)}")
        print(f"  Too much missing:  {n_gated} (okmiss = {okmiss:.2f})")

    return result


# ---------------------------------------------------------------------------
# Several subscales of one instrument
# ---------------------------------------------------------------------------

def score_scales(
    df,
    scales: Mapping[str, Mapping],
    **defaults,
) -> pd.DataFrame:
    """
    Score several scales (e.g. the subscales of one instrument) at once.

    Args:
        df: Response table holding the items of every scale.
        scales: Maps each output scale name to the keyword arguments of
                :func:`score_scale` for that scale (at least ``items``).
                ``scalename`` is taken from the key.
        **defaults: Keyword arguments applied to every scale unless the
                    scale's own mapping overrides them (e.g. ``minmax``).

    Returns:
        DataFrame aligned with ``df`` with one column per scale, in mapping
        order, each followed by its ``_N`` column when ``keep_nvalid`` is set.

    Raises:
        ParameterError: No scales given, or a scale mapping sets scalename.
        Any error raised by :func:`score_scale` for an individual scale.
    """
    if not scales:
        raise ParameterError("At least one scale definition is required.")
    if "scalename" in defaults:
        raise ParameterError("scalename is taken from the keys of `scales`; do not pass it.")

    df = check_table(df)
    parts = []
    for name, options in scales.items():
        if "scalename" in options:
            raise ParameterError(
                f"Scale {name!r}: scalename is taken from the mapping key; do not set it."
            )
        parts.append(score_scale(df, **{**defaults, **options, "scalename": name}))

    return pd.concat(parts, axis=1)


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------

def print_scoring_summary(result: pd.DataFrame, scalename: str = DEFAULT_SCALENAME) -> None:
    """Print descriptive statistics for one score column of a result table."""
    scores = result[scalename]
    n_scored = int(scores.notna().sum())
    n_missing = len(scores) - n_scored

    print(f"\n{scalename} Summary:")
    print(f"  Respondents: {len(scores):,}")
    print(f"  Scored:      {n_scored:,}")
    print(f"  Missing:     {n_missing:,}")
    if n_scored:
        print(f"  Mean:        {scores.mean():.2f}")
        print(f"  Range:       {scores.min():.2f} to {scores.max():.2f}")
