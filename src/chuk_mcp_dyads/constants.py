"""
Constants and enums for the dyad system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class DyadType(str, Enum):
    """
    Bar geometry of a dyad.

    A straight bar stops both notes at the same fret,
    a slant bar stops them one fret apart.
    """

    STRAIGHT = "straight"
    SLANT = "slant"


class DyadSource(str, Enum):
    """How a dyad was found."""

    DIRECT = "direct"  # Plain open/fretted positions
    ALTERED = "altered"  # At least one note uses an engaged lever
    DIATONIC_SUBSTITUTE = "diatonic-substitute"
    TRITONE_SUBSTITUTE = "tritone-substitute"


class SubstitutionKind(str, Enum):
    """Kind of substitute chord."""

    DIATONIC = "diatonic"
    TRITONE = "tritone"


class GuideTonePolicy(str, Enum):
    """
    How "guide tones" display mode prunes the dyad list.

    WEIGHTED is the default; the others are kept as explicit alternates.
    """

    ROLE_PAIR = "role_pair"  # Strict 3rd + 7th pairs only
    WEIGHTED = "weighted"  # Importance-weighted score >= threshold
    INTERVAL_PRIORITY = "interval_priority"  # Interval table, no root needed


class DisplayMode(str, Enum):
    """Which dyads a query returns."""

    ALL = "all"
    GUIDE = "guide"


# Fretboard defaults
DEFAULT_MAX_FRET = 24
DEFAULT_MAX_SLANT = 1
MIN_STRINGS = 2
MAX_STRINGS = 12

# Lap steel tuning G B D F# A D (low to high)
LAP_STEEL_TUNING_NAMES: tuple[str, ...] = ("G", "B", "D", "F#", "A", "D")

# Base octave per string for the default tuning (G2 B2 D3 F#3 A3 D4)
DEFAULT_BASE_OCTAVES: tuple[int, ...] = (2, 2, 3, 3, 3, 4)
FALLBACK_OCTAVE = 3

# Fret proximity used by overlap-aware selection, per policy
DEFAULT_FRET_PROXIMITY: dict[GuideTonePolicy, int] = {
    GuideTonePolicy.ROLE_PAIR: 2,
    GuideTonePolicy.WEIGHTED: 3,
    GuideTonePolicy.INTERVAL_PRIORITY: 2,
}

# Minimum combined importance kept by the weighted policy
WEIGHTED_SCORE_THRESHOLD = 8

# Label of the tritone substitute (not a diatonic degree)
TRITONE_SUBSTITUTE_LABEL = "bII7"

# Name of the instrument used when a query names none
DEFAULT_INSTRUMENT = "c6-gbdfad"

# Schema versions
SchemaVersion = Literal["instrument/v1"]


class ErrorMessages:
    """Standardized error messages."""

    INVALID_NOTE = "Invalid note: '{note}'."
    INVALID_CHORD = "Invalid chord: '{chord}'. Expected a root like C, F# or Bb plus a quality."
    UNKNOWN_QUALITY = "Unknown chord quality: '{quality}'."
    TOO_FEW_STRINGS = "Need at least {min} strings, got {count}."
    TOO_MANY_STRINGS = "Maximum {max} strings, got {count}."
    INVALID_TUNING_NOTE = "Invalid note in tuning: '{note}'."
    UNKNOWN_DEGREE = "Unknown degree: '{degree}'. Expected one of I, ii, iii, IV, V, vi, vii°."
    INSTRUMENT_NOT_FOUND = "Instrument '{name}' not found."
    DYAD_INDEX_OUT_OF_RANGE = "Dyad index {index} out of range (found {count} dyads)."


class SuccessMessages:
    """Standardized success messages."""

    MIDI_EXPORTED = "Exported dyad {dyad} to {path}."
    INSTRUMENT_COPIED = "Copied instrument '{name}' to {path}."
