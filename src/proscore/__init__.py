"""
proscore — scoring engine for patient-reported outcome (PRO) and other
psychometric questionnaire scales.

Module layout
-------------
config.py       — Score types, defaults, output naming, fake-data defaults
errors.py       — Error taxonomy (structural, parameter, selection, range)
selection.py    — Item-set specifications and item selection
validation.py   — Table, parameter, content, and response-range checks
reverse.py      — Reverse coding
missingness.py  — Per-respondent missing-item tallies
scores.py       — Mean / prorated sum / 0-100 scores, missing-data cutoff
engine.py       — score_scale() orchestration, multi-scale scoring, summary
fake_data.py    — Random questionnaire data for examples and tests

Public interface
----------------
Score one scale:
    score_scale(df, items, revitems, minmax, okmiss, score_type, scalename)

Score several subscales:
    score_scales(df, {"scale": {"items": [...]}, ...}, minmax=(0, 4))

Building blocks:
    revcode(values, item_min, item_max)
    rerange(values, item_min, item_max, new_min, new_max)
    miss_tally(items_df, what)
    make_fake_data(n, nitems, values, propmiss, with_id)
"""

from .engine import (
    assemble_result,
    print_scoring_summary,
    score_scale,
    score_scales,
)
from .errors import (
    ParameterError,
    RangeError,
    ScoringError,
    SelectionError,
    StructuralError,
)
from .fake_data import make_fake_data
from .missingness import miss_tally
from .reverse import revcode
from .scores import rerange

__all__ = [
    # Scoring
    "score_scale",
    "score_scales",
    "assemble_result",
    "print_scoring_summary",
    # Building blocks
    "revcode",
    "rerange",
    "miss_tally",
    "make_fake_data",
    # Errors
    "ScoringError",
    "StructuralError",
    "ParameterError",
    "SelectionError",
    "RangeError",
]
