"""
Scale primitives - Degree, HarmonicFunction, Key.

Degrees are the seven diatonic chord positions of a major key (I through vii°).
A Key is a tonic; it resolves degrees to chord roots and back.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from chuk_mcp_dyads.constants import ErrorMessages

from .pitch import PitchClass


class HarmonicFunction(str, Enum):
    """Functional family a diatonic chord belongs to."""

    TONIC = "tonic"
    SUBDOMINANT = "subdominant"
    DOMINANT = "dominant"


class Degree(str, Enum):
    """
    Diatonic scale-degree label of a chord in a major key.

    Case indicates quality (upper = major, lower = minor),
    the degree sign marks the diminished seventh degree.
    """

    I = "I"  # noqa: E741
    ii = "ii"
    iii = "iii"
    IV = "IV"
    V = "V"
    vi = "vi"
    vii_dim = "vii°"

    @property
    def semitones(self) -> int:
        """Offset of this degree above the tonic in a major scale."""
        return _DEGREE_SEMITONES[self]

    @property
    def quality_suffix(self) -> str:
        """Chord-symbol suffix used when building this degree's chord."""
        return _DEGREE_QUALITY[self]

    @property
    def function(self) -> HarmonicFunction:
        """Harmonic function of this degree."""
        return _DEGREE_FUNCTION[self]

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, label: str) -> Degree:
        """
        Parse a degree label like 'I', 'ii', 'V', 'vii°'.

        'vii', 'viio' and 'vii0' are accepted for the seventh degree.
        Case matters: 'v' is not 'V'.
        """
        text = label.strip()
        if text in ("vii", "viio", "vii0"):
            return cls.vii_dim
        for member in cls:
            if member.value == text:
                return member
        raise ValueError(ErrorMessages.UNKNOWN_DEGREE.format(degree=label))


# Major scale: W W H W W W H
_DEGREE_SEMITONES: dict[Degree, int] = {
    Degree.I: 0,
    Degree.ii: 2,
    Degree.iii: 4,
    Degree.IV: 5,
    Degree.V: 7,
    Degree.vi: 9,
    Degree.vii_dim: 11,
}

_DEGREE_QUALITY: dict[Degree, str] = {
    Degree.I: "",
    Degree.ii: "m",
    Degree.iii: "m",
    Degree.IV: "",
    Degree.V: "7",  # dominant 7 so the tritone is present
    Degree.vi: "m",
    Degree.vii_dim: "m7b5",
}

_DEGREE_FUNCTION: dict[Degree, HarmonicFunction] = {
    Degree.I: HarmonicFunction.TONIC,
    Degree.ii: HarmonicFunction.SUBDOMINANT,
    Degree.iii: HarmonicFunction.TONIC,
    Degree.IV: HarmonicFunction.SUBDOMINANT,
    Degree.V: HarmonicFunction.DOMINANT,
    Degree.vi: HarmonicFunction.TONIC,
    Degree.vii_dim: HarmonicFunction.DOMINANT,
}


@dataclass(frozen=True)
class Key:
    """
    A major key, identified by its tonic.

    This is the context for resolving degrees to chord roots.

    Examples:
        Key(PitchClass.C).degree_to_pitch(Degree.V) = G
        Key.from_chord(PitchClass.A, Degree.vi) = Key(C)
    """

    tonic: PitchClass

    def degree_to_pitch(self, degree: Degree) -> PitchClass:
        """Resolve a degree to the root of its chord."""
        return self.tonic.transpose(degree.semitones)

    def chord_symbol(self, degree: Degree) -> str:
        """Chord symbol of a degree in this key, e.g. 'Dm' for ii in C."""
        return f"{self.degree_to_pitch(degree).spell()}{degree.quality_suffix}"

    @classmethod
    def from_chord(cls, root: PitchClass, degree: Degree) -> Key:
        """Recover the implied key of a chord played as the given degree."""
        return cls(root.transpose(-degree.semitones))

    def __str__(self) -> str:
        return f"{self.tonic.spell()} major"
