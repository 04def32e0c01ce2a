"""
Pitch model - pitch classes, spellings and intervals.

Everything on the fretboard is octave-free: a note is one of 12 pitch
classes, and the distance between two notes is reduced to 0-11 semitones.
Spelling (sharp or flat) only matters at the text boundary.
"""

from __future__ import annotations

import re
from enum import IntEnum

from chuk_mcp_dyads.constants import ErrorMessages
from chuk_mcp_dyads.errors import InvalidPitchError

# (sharp, flat) spelling of each semitone
_SPELLINGS: tuple[tuple[str, str], ...] = (
    ("C", "C"),
    ("C#", "Db"),
    ("D", "D"),
    ("D#", "Eb"),
    ("E", "E"),
    ("F", "F"),
    ("F#", "Gb"),
    ("G", "G"),
    ("G#", "Ab"),
    ("A", "A"),
    ("A#", "Bb"),
    ("B", "B"),
)

_BY_SPELLING: dict[str, int] = {sharp: i for i, (sharp, _) in enumerate(_SPELLINGS)}
_BY_SPELLING.update({flat: i for i, (_, flat) in enumerate(_SPELLINGS)})
# Enharmonic flats with no sharp counterpart in the table
_BY_SPELLING.update({"Fb": 4, "Cb": 11})

_NOTE_RE = re.compile(r"^([A-Ga-g])([#b]?)$")

_INTERVAL_LABELS = ("unison", "m2", "M2", "m3", "M3", "P4", "TT", "P5", "m6", "M6", "m7", "M7")


class PitchClass(IntEnum):
    """
    One of the 12 chromatic pitch classes, C = 0.

    Members use sharp names (Cs for C#); flat input spellings map onto them,
    so Db and C# are the same member.
    """

    C = 0
    Cs = 1
    D = 2
    Ds = 3
    E = 4
    F = 5
    Fs = 6
    G = 7
    Gs = 8
    A = 9
    As = 10
    B = 11

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """
        Parse a note spelling: a letter A-G (any case) plus optional '#' or 'b'.

        E#, B# and double accidentals are not spellings we accept.

        Raises:
            InvalidPitchError: If the spelling is not recognized
        """
        match = _NOTE_RE.match(name.strip())
        semitone = None
        if match:
            semitone = _BY_SPELLING.get(match.group(1).upper() + match.group(2))
        if semitone is None:
            raise InvalidPitchError(ErrorMessages.INVALID_NOTE.format(note=name))
        return cls(semitone)

    @classmethod
    def from_semitone(cls, semitone: int) -> PitchClass:
        """Pitch class of any semitone count, negatives included."""
        return cls(semitone % 12)

    def transpose(self, semitones: int) -> PitchClass:
        return PitchClass.from_semitone(self.value + semitones)

    def interval_to(self, other: PitchClass) -> Interval:
        """Upward interval from this pitch class to `other`."""
        return Interval(interval_between(self, other))

    def to_midi(self, octave: int = 4) -> int:
        """MIDI note number in the given octave (middle C = C4 = 60)."""
        return 12 * (octave + 1) + self.value

    def spell(self, prefer_flats: bool = False) -> str:
        sharp, flat = _SPELLINGS[self.value]
        return flat if prefer_flats else sharp

    def __str__(self) -> str:
        return self.spell()


class Interval(IntEnum):
    """
    Upward distance between two pitch classes, within one octave.

    Dyads are labelled by the interval from the lower-string note
    to the higher-string note.
    """

    UNISON = 0
    MINOR_SECOND = 1
    MAJOR_SECOND = 2
    MINOR_THIRD = 3
    MAJOR_THIRD = 4
    PERFECT_FOURTH = 5
    TRITONE = 6
    PERFECT_FIFTH = 7
    MINOR_SIXTH = 8
    MAJOR_SIXTH = 9
    MINOR_SEVENTH = 10
    MAJOR_SEVENTH = 11

    @property
    def semitones(self) -> int:
        return int(self.value)

    @property
    def label(self) -> str:
        """Short label: unison, m2, ..., TT, ..., M7."""
        return _INTERVAL_LABELS[self.value]

    def invert(self) -> Interval:
        """Interval that completes this one to an octave (M3 -> m6, unison -> unison)."""
        return Interval((12 - self.value) % 12)

    def __str__(self) -> str:
        return self.label


def normalize_note(spelling: str) -> PitchClass:
    """Normalize a note spelling to its canonical pitch class."""
    return PitchClass.parse(spelling)


def semitone_of(pitch: PitchClass) -> int:
    return int(pitch.value)


def interval_between(a: PitchClass, b: PitchClass) -> int:
    """Directional interval a -> b in semitones, always 0-11."""
    return (b.value - a.value) % 12


def interval_label(semitones: int) -> str:
    """Label of an interval, reduced to a single octave first."""
    return _INTERVAL_LABELS[semitones % 12]
