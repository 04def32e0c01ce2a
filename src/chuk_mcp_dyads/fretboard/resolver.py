"""
Position resolver - pitch classes to string/fret coordinates.

For a target pitch class this scans every string and fret of the tuning.
When altering mechanisms are configured, any lever whose engaged pitch is
a chord tone is held for the whole chord: its open string then sounds the
engaged pitch, and the unaltered open string is no longer available.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from chuk_mcp_dyads.constants import DEFAULT_MAX_FRET
from chuk_mcp_dyads.core.pitch import PitchClass

from .tuning import LAP_STEEL_TUNING, AlteringMechanism, Tuning


@dataclass(frozen=True)
class FretPosition:
    """
    A single stopped (or open) note on the fretboard.

    `engaged` marks an open string sounding through an engaged lever.
    """

    string: int  # 0 = lowest string
    fret: int  # 0 = open
    pitch: PitchClass
    engaged: bool = False

    @property
    def coordinate(self) -> tuple[int, int]:
        """(string, fret) pair, ignoring pitch and lever state."""
        return (self.string, self.fret)

    def __str__(self) -> str:
        lever = "*" if self.engaged else ""
        return f"{self.pitch.spell()}{lever}@{self.string}:{self.fret}"


def note_at(string: int, fret: int, tuning: Tuning = LAP_STEEL_TUNING) -> PitchClass:
    """Get the note at a specific string and fret position."""
    return tuning.note_at(string, fret)


def engaged_strings(
    mechanisms: Iterable[AlteringMechanism],
    chord_tones: Iterable[PitchClass],
) -> frozenset[int]:
    """Strings whose lever yields a chord tone, and so is held for this chord."""
    tones = set(chord_tones)
    return frozenset(m.string for m in mechanisms if m.engaged_pitch in tones)


def positions_for(
    pitch: PitchClass,
    tuning: Tuning = LAP_STEEL_TUNING,
    max_fret: int = DEFAULT_MAX_FRET,
    chord_tones: Iterable[PitchClass] | None = None,
    mechanisms: Sequence[AlteringMechanism] = (),
) -> list[FretPosition]:
    """
    Find every position on the fretboard that sounds a pitch class.

    Args:
        pitch: Target pitch class
        tuning: Open-string tuning
        max_fret: Highest fret searched (inclusive)
        chord_tones: Whole chord being voiced; decides which levers are held
        mechanisms: Levers available on the instrument

    Returns:
        Lever positions first, then (string, fret) scan order
    """
    positions: list[FretPosition] = []
    held: frozenset[int] = frozenset()

    if mechanisms:
        tones = set(chord_tones) if chord_tones is not None else {pitch}
        held = engaged_strings(mechanisms, tones)
        for mechanism in mechanisms:
            if mechanism.string in held and mechanism.engaged_pitch == pitch:
                positions.append(FretPosition(mechanism.string, 0, pitch, engaged=True))

    for string, open_pitch in enumerate(tuning):
        for fret in range(max_fret + 1):
            if fret == 0 and string in held:
                continue
            if (open_pitch.value + fret) % 12 == pitch.value:
                positions.append(FretPosition(string, fret, pitch))

    return positions


def chord_positions(
    tones: Sequence[PitchClass],
    tuning: Tuning = LAP_STEEL_TUNING,
    max_fret: int = DEFAULT_MAX_FRET,
    mechanisms: Sequence[AlteringMechanism] = (),
) -> list[FretPosition]:
    """Find all positions for every chord tone, tone by tone."""
    positions: list[FretPosition] = []
    for tone in tones:
        positions.extend(
            positions_for(tone, tuning, max_fret, chord_tones=tones, mechanisms=mechanisms)
        )
    return positions
