"""
Tuning primitives - Tuning and AlteringMechanism.

A tuning is the ordered set of open-string pitches, lowest string first.
An altering mechanism (knee or foot lever) swaps one string's open pitch
for another while held.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from chuk_mcp_dyads.constants import (
    LAP_STEEL_TUNING_NAMES,
    MAX_STRINGS,
    MIN_STRINGS,
    ErrorMessages,
)
from chuk_mcp_dyads.core.pitch import PitchClass
from chuk_mcp_dyads.errors import InvalidPitchError, InvalidTuningError

_TOKEN_SPLIT_RE = re.compile(r"[\s,]+")


@dataclass(frozen=True)
class Tuning:
    """
    Open-string pitches of an instrument, index 0 = lowest string.

    Immutable and hashable. Length is validated on construction.
    """

    strings: tuple[PitchClass, ...]

    def __post_init__(self) -> None:
        count = len(self.strings)
        if count < MIN_STRINGS:
            raise InvalidTuningError(
                ErrorMessages.TOO_FEW_STRINGS.format(min=MIN_STRINGS, count=count)
            )
        if count > MAX_STRINGS:
            raise InvalidTuningError(
                ErrorMessages.TOO_MANY_STRINGS.format(max=MAX_STRINGS, count=count)
            )

    def __len__(self) -> int:
        return len(self.strings)

    def __getitem__(self, index: int) -> PitchClass:
        return self.strings[index]

    def __iter__(self) -> Iterator[PitchClass]:
        return iter(self.strings)

    def note_at(self, string: int, fret: int) -> PitchClass:
        """Pitch class sounded at a string/fret coordinate."""
        return self.strings[string].transpose(fret)

    def names(self) -> list[str]:
        """Sharp spellings of the open strings."""
        return [p.spell() for p in self.strings]

    def __str__(self) -> str:
        return " ".join(self.names())

    @classmethod
    def of(cls, notes: Iterable[PitchClass | str]) -> Tuning:
        """Build a tuning from pitch classes or note names."""
        strings: list[PitchClass] = []
        for note in notes:
            if isinstance(note, PitchClass):
                strings.append(note)
                continue
            try:
                strings.append(PitchClass.parse(note))
            except InvalidPitchError as e:
                raise InvalidTuningError(
                    ErrorMessages.INVALID_TUNING_NOTE.format(note=note)
                ) from e
        return cls(tuple(strings))


def parse_tuning(text: str) -> Tuning:
    """
    Parse a tuning string like 'G B D F# A D' or 'G,B,D,F#,A,D'.

    Raises:
        InvalidTuningError: On an invalid note or a string count outside 2-12
    """
    tokens = [t for t in _TOKEN_SPLIT_RE.split(text.strip()) if t]
    return Tuning.of(tokens)


LAP_STEEL_TUNING = Tuning.of(LAP_STEEL_TUNING_NAMES)


@dataclass(frozen=True)
class AlteringMechanism:
    """
    A lever bound to one string.

    While engaged, the open string sounds `engaged_pitch` instead of its
    nominal pitch. Engagement is decided per chord, never stored here.
    """

    string: int
    engaged_pitch: PitchClass
    name: str = ""

    def __post_init__(self) -> None:
        if self.string < 0:
            raise ValueError(f"String index must be >= 0, got {self.string}")

    def __str__(self) -> str:
        label = self.name or f"lever {self.string}"
        return f"{label} (string {self.string} -> {self.engaged_pitch.spell()})"


def validate_mechanisms(tuning: Tuning, mechanisms: Iterable[AlteringMechanism]) -> None:
    """
    Check that every mechanism targets an existing string, one per string.

    Raises:
        ValueError: If a mechanism is out of range or shares a string
    """
    seen: set[int] = set()
    for mechanism in mechanisms:
        if mechanism.string >= len(tuning):
            raise ValueError(
                f"Lever on string {mechanism.string} but tuning has {len(tuning)} strings"
            )
        if mechanism.string in seen:
            raise ValueError(f"More than one lever on string {mechanism.string}")
        seen.add(mechanism.string)
