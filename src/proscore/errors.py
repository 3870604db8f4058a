"""
Error taxonomy for scale scoring.

Every failure is detected before any score is computed; none of these are
retried internally.  Per-respondent missing data is NOT an error: it yields
a NaN score through the missing-data cutoff instead.
"""


class ScoringError(ValueError):
    """Base class for all input problems detected by the scoring engine."""


class StructuralError(ScoringError):
    """Input is not a usable table: not rectangular, no columns, duplicate
    labels, or item columns holding non-numeric values."""


class ParameterError(ScoringError):
    """A scoring parameter is out of range or inconsistent with another."""


class SelectionError(ScoringError):
    """Requested item (or reverse-item) columns do not exist in the table."""


class RangeError(ScoringError):
    """An observed item value lies outside the declared response range."""
