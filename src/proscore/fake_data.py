"""
Fake questionnaire data for examples and tests.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
import pandas as pd

from .config import (
    FAKE_ID_COLUMN,
    FAKE_ITEM_PREFIX,
    FAKE_N_ITEMS,
    FAKE_N_RESPONDENTS,
    FAKE_PROPMISS,
    FAKE_VALUES,
)
from .errors import ParameterError


def make_fake_data(
    n: int = FAKE_N_RESPONDENTS,
    nitems: int = FAKE_N_ITEMS,
    values: Iterable[float] = FAKE_VALUES,
    propmiss: float = FAKE_PROPMISS,
    prefix: str = FAKE_ITEM_PREFIX,
    with_id: bool = False,
    seed: int | None = None,
) -> pd.DataFrame:
    """
    Generate random item responses with some responses missing.

    Each response is drawn uniformly from ``values``.  Then
    ``round(propmiss * n * nitems)`` randomly chosen cells are set to NaN,
    so some respondents may end up with every item missing.

    Args:
        n: Number of respondents (rows).
        nitems: Number of items, named ``<prefix>1`` .. ``<prefix><nitems>``.
        values: Possible response values, e.g. ``range(0, 5)``.
        propmiss: Proportion of all cells set to missing, in [0, 1].
        prefix: Item name prefix.
        with_id: Add a leading ``ID`` column numbered 1..n.
        seed: Seed for numpy's random Generator, for reproducible data.

    Returns:
        DataFrame of shape (n, nitems), or (n, nitems + 1) with ``with_id``.

    Raises:
        ParameterError: Non-positive n or nitems, no values, or propmiss
                        outside [0, 1].
    """
    values = np.asarray(list(values), dtype="float64")
    if n < 1 or nitems < 1:
        raise ParameterError(f"n and nitems must be positive, got n={n}, nitems={nitems}.")
    if values.size == 0:
        raise ParameterError("values must contain at least one possible response.")
    if not 0 <= propmiss <= 1:
        raise ParameterError(f"propmiss must be between 0 and 1, got {propmiss}.")

    rng = np.random.default_rng(seed)
    responses = rng.choice(values, size=(n, nitems))

    n_missing = int(round(propmiss * n * nitems))
    if n_missing:
        cells = rng.choice(n * nitems, size=n_missing, replace=False)
        responses.flat[cells] = np.nan

    df = pd.DataFrame(responses, columns=[f"{prefix}{i}" for i in range(1, nitems + 1)])
    if with_id:
        df.insert(0, FAKE_ID_COLUMN, np.arange(1, n + 1))
    return df
