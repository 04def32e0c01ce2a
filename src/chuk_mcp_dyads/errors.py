"""
Parse-boundary errors.

These are the only user-facing failures in the system. They are raised when
text (note names, chord symbols, tunings) is turned into pitch classes.
Everything downstream consumes already-validated values.
"""

from __future__ import annotations


class DyadsError(ValueError):
    """Base class for user-facing parse errors."""


class InvalidPitchError(DyadsError):
    """A note spelling (or chord root) is malformed or unrecognized."""


class UnknownChordQualityError(DyadsError):
    """The chord root is valid but its quality suffix is not in the table."""


class InvalidTuningError(DyadsError):
    """A tuning has too few or too many strings, or an invalid note."""
