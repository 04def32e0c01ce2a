"""
Core music primitives - the pitch model.

These are the mathematical invariants that everything else composes on:
- PitchClass: The 12 chromatic pitch classes (0-11)
- Interval: Distance between pitches in semitones
- ChordQuality: Offset stacks defining chord types
- Chord: Concrete chord with root and quality
- Degree: Diatonic chord positions in a major key
- Key: Tonic that resolves degrees to chord roots
"""

from chuk_mcp_dyads.core.chord import (
    CHORD_QUALITIES,
    Chord,
    ChordQuality,
    chord_tones,
    expand_chord,
)
from chuk_mcp_dyads.core.pitch import (
    Interval,
    PitchClass,
    interval_between,
    interval_label,
    normalize_note,
    semitone_of,
)
from chuk_mcp_dyads.core.scale import Degree, HarmonicFunction, Key

__all__ = [
    # Pitch
    "PitchClass",
    "Interval",
    "normalize_note",
    "semitone_of",
    "interval_between",
    "interval_label",
    # Chord
    "CHORD_QUALITIES",
    "ChordQuality",
    "Chord",
    "expand_chord",
    "chord_tones",
    # Scale
    "Degree",
    "HarmonicFunction",
    "Key",
]
