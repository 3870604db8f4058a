"""
Scoring configuration: recognized option values, defaults, and output
naming conventions.

All constants used across the proscore modules are centralized here so
that configuration is separated from logic.
"""

# ---------------------------------------------------------------------------
# Score types
# ---------------------------------------------------------------------------

# "pomp" (Percent Of the Maximum Possible) and "100" are the same 0-100
# rescaling under two names.
SCORE_TYPES: tuple[str, ...] = ("pomp", "100", "sum", "mean")
RESCALED_TYPES: frozenset[str] = frozenset({"pomp", "100"})

DEFAULT_SCORE_TYPE = "pomp"

# Target range of the rescaled score types.
POMP_MIN: float = 0.0
POMP_MAX: float = 100.0

# ---------------------------------------------------------------------------
# Missing data
# ---------------------------------------------------------------------------

# Maximum proportion of missing items a respondent may have and still be
# scored (prorated).  Respondents strictly above this receive NaN.
DEFAULT_OKMISS: float = 0.50

# Per-respondent tallies understood by miss_tally().
TALLY_KINDS: tuple[str, ...] = ("pmiss", "nmiss", "nvalid", "pvalid")

# ---------------------------------------------------------------------------
# Output naming
# ---------------------------------------------------------------------------

DEFAULT_SCALENAME = "scoredScale"
NVALID_SUFFIX = "_N"

# ---------------------------------------------------------------------------
# Fake data generator defaults
# ---------------------------------------------------------------------------

FAKE_N_RESPONDENTS = 20
FAKE_N_ITEMS = 9
FAKE_VALUES: tuple[int, ...] = (0, 1, 2, 3, 4)
FAKE_PROPMISS = 0.20
FAKE_ITEM_PREFIX = "q"
FAKE_ID_COLUMN = "ID"
