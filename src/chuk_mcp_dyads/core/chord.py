"""
Chord primitives - ChordQuality, Chord and chord-symbol expansion.

Chords are stacks of intervals. Chord qualities define the interval pattern,
looked up by the suffix of a chord symbol ('m7', 'dim', 'maj9', ...).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

from chuk_mcp_dyads.constants import ErrorMessages
from chuk_mcp_dyads.errors import InvalidPitchError, UnknownChordQualityError

from .pitch import PitchClass

_SYMBOL_RE = re.compile(r"^([A-Ga-g][#b]?)(.*)$")


@dataclass(frozen=True)
class ChordQuality:
    """
    A chord quality defined by its offsets from the root.

    Offsets are measured from the root, not stacked, and kept unreduced:
    a dominant 9 is (0, 4, 7, 10, 14). Reduction to pitch classes happens
    when the quality is applied to a root.

    Immutable and hashable.
    """

    offsets: tuple[int, ...]
    name: str = ""

    # Common chord qualities (defined after class)
    MAJOR: ClassVar[ChordQuality]
    MINOR: ClassVar[ChordQuality]
    DIMINISHED: ClassVar[ChordQuality]
    AUGMENTED: ClassVar[ChordQuality]
    DOMINANT_7: ClassVar[ChordQuality]
    MAJOR_7: ClassVar[ChordQuality]
    MINOR_7: ClassVar[ChordQuality]
    DIMINISHED_7: ClassVar[ChordQuality]
    HALF_DIMINISHED_7: ClassVar[ChordQuality]
    AUGMENTED_7: ClassVar[ChordQuality]
    MAJOR_6: ClassVar[ChordQuality]
    MINOR_6: ClassVar[ChordQuality]
    SUS2: ClassVar[ChordQuality]
    SUS4: ClassVar[ChordQuality]
    DOMINANT_9: ClassVar[ChordQuality]
    MAJOR_9: ClassVar[ChordQuality]
    MINOR_9: ClassVar[ChordQuality]

    def get_pitches(self, root: PitchClass) -> list[PitchClass]:
        """
        Get all pitch classes in this chord, in offset order.

        Args:
            root: The root pitch class

        Returns:
            List of pitch classes (extensions reduced into the octave)
        """
        return [root.transpose(offset) for offset in self.offsets]

    @property
    def third(self) -> int | None:
        """The third of the chord (if present)."""
        for offset in self.offsets:
            if offset % 12 in (3, 4):
                return offset
        return None

    @property
    def seventh(self) -> int | None:
        """The seventh of the chord (if present)."""
        for offset in self.offsets:
            if offset % 12 in (10, 11):
                return offset
        return None

    def __str__(self) -> str:
        return self.name or f"ChordQuality({self.offsets})"


ChordQuality.MAJOR = ChordQuality((0, 4, 7), "major")
ChordQuality.MINOR = ChordQuality((0, 3, 7), "minor")
ChordQuality.DIMINISHED = ChordQuality((0, 3, 6), "diminished")
ChordQuality.AUGMENTED = ChordQuality((0, 4, 8), "augmented")
ChordQuality.DOMINANT_7 = ChordQuality((0, 4, 7, 10), "dominant 7")
ChordQuality.MAJOR_7 = ChordQuality((0, 4, 7, 11), "major 7")
ChordQuality.MINOR_7 = ChordQuality((0, 3, 7, 10), "minor 7")
ChordQuality.DIMINISHED_7 = ChordQuality((0, 3, 6, 9), "diminished 7")
ChordQuality.HALF_DIMINISHED_7 = ChordQuality((0, 3, 6, 10), "half-diminished 7")
ChordQuality.AUGMENTED_7 = ChordQuality((0, 4, 8, 10), "augmented 7")
ChordQuality.MAJOR_6 = ChordQuality((0, 4, 7, 9), "major 6")
ChordQuality.MINOR_6 = ChordQuality((0, 3, 7, 9), "minor 6")
ChordQuality.SUS2 = ChordQuality((0, 2, 7), "sus2")
ChordQuality.SUS4 = ChordQuality((0, 5, 7), "sus4")
ChordQuality.DOMINANT_9 = ChordQuality((0, 4, 7, 10, 14), "dominant 9")
ChordQuality.MAJOR_9 = ChordQuality((0, 4, 7, 11, 14), "major 9")
ChordQuality.MINOR_9 = ChordQuality((0, 3, 7, 10, 14), "minor 9")

# Suffix -> quality. Closed table: anything else is an unknown quality.
CHORD_QUALITIES: dict[str, ChordQuality] = {
    "": ChordQuality.MAJOR,
    "maj": ChordQuality.MAJOR,
    "M": ChordQuality.MAJOR,
    "m": ChordQuality.MINOR,
    "min": ChordQuality.MINOR,
    "-": ChordQuality.MINOR,
    "dim": ChordQuality.DIMINISHED,
    "o": ChordQuality.DIMINISHED,
    "°": ChordQuality.DIMINISHED,
    "aug": ChordQuality.AUGMENTED,
    "+": ChordQuality.AUGMENTED,
    "7": ChordQuality.DOMINANT_7,
    "maj7": ChordQuality.MAJOR_7,
    "M7": ChordQuality.MAJOR_7,
    "Δ7": ChordQuality.MAJOR_7,
    "Δ": ChordQuality.MAJOR_7,
    "m7": ChordQuality.MINOR_7,
    "min7": ChordQuality.MINOR_7,
    "-7": ChordQuality.MINOR_7,
    "dim7": ChordQuality.DIMINISHED_7,
    "o7": ChordQuality.DIMINISHED_7,
    "°7": ChordQuality.DIMINISHED_7,
    "m7b5": ChordQuality.HALF_DIMINISHED_7,
    "ø": ChordQuality.HALF_DIMINISHED_7,
    "ø7": ChordQuality.HALF_DIMINISHED_7,
    "aug7": ChordQuality.AUGMENTED_7,
    "+7": ChordQuality.AUGMENTED_7,
    "6": ChordQuality.MAJOR_6,
    "m6": ChordQuality.MINOR_6,
    "sus2": ChordQuality.SUS2,
    "sus4": ChordQuality.SUS4,
    "9": ChordQuality.DOMINANT_9,
    "maj9": ChordQuality.MAJOR_9,
    "m9": ChordQuality.MINOR_9,
}


@dataclass(frozen=True)
class Chord:
    """
    A concrete chord with a root pitch and quality.

    This is the resolved form of a chord symbol - the tones are what
    the fretboard search looks for.
    """

    root: PitchClass
    quality: ChordQuality
    suffix: str = ""

    @property
    def tones(self) -> list[PitchClass]:
        """Chord tones in offset order, root first."""
        return self.quality.get_pitches(self.root)

    @property
    def offsets(self) -> tuple[int, ...]:
        """Unreduced offsets from the root (extensions keep 14, etc.)."""
        return self.quality.offsets

    @property
    def symbol(self) -> str:
        """Canonical chord symbol (sharp spelling of the root)."""
        return f"{self.root.spell()}{self.suffix}"

    def __str__(self) -> str:
        return self.symbol

    @classmethod
    def parse(cls, symbol: str) -> Chord:
        """
        Parse a chord symbol like 'C', 'Am7', 'F#dim', 'Bbmaj9'.

        Raises:
            InvalidPitchError: If the symbol does not start with a valid root
            UnknownChordQualityError: If the suffix is not a known quality
        """
        text = symbol.strip()
        match = _SYMBOL_RE.match(text)
        if not match:
            raise InvalidPitchError(ErrorMessages.INVALID_CHORD.format(chord=symbol))

        root_str, suffix = match.groups()
        root = PitchClass.parse(root_str)

        quality = CHORD_QUALITIES.get(suffix)
        if quality is None:
            raise UnknownChordQualityError(ErrorMessages.UNKNOWN_QUALITY.format(quality=suffix))

        return cls(root, quality, suffix)


def expand_chord(symbol: str) -> Chord:
    """Expand a chord symbol into its root and ordered chord tones."""
    return Chord.parse(symbol)


def chord_tones(symbol: str) -> list[PitchClass]:
    """Shortcut for the ordered tones of a chord symbol."""
    return Chord.parse(symbol).tones
