# rfmatch/tl_errors.py
"""Exceptions raised by the synthesis engine.

All of them derive from ``ValueError`` so callers that only guard against bad
numeric input keep working.
"""


class MatchingError(ValueError):
    """Base class for every failure reported by the engine."""


class InvalidInputError(MatchingError):
    """A request field is out of its domain (non-positive RL/f/Z0, er < 1, ...)."""


class UnsupportedLoadError(MatchingError):
    """The load cannot be matched by the selected topology."""


class NoRealSolutionError(MatchingError):
    """The closed-form equations have a negative discriminant."""


class NumericDegeneracyError(MatchingError):
    """A denominator or root collapsed below the degeneracy floor."""
