"""
Dyad search - every two-note voicing a single bar can stop.

Rules:
- Straight bar: same fret, any two strings
- Slant bar: fret difference <= max_slant, different strings
- Two notes on one string can never be stopped together

All operations are deterministic: same input → same ordered output.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from chuk_mcp_dyads.constants import (
    DEFAULT_MAX_FRET,
    DEFAULT_MAX_SLANT,
    DyadSource,
    DyadType,
    SubstitutionKind,
)
from chuk_mcp_dyads.core.pitch import PitchClass, interval_between, interval_label
from chuk_mcp_dyads.fretboard import (
    LAP_STEEL_TUNING,
    AlteringMechanism,
    FretPosition,
    Tuning,
    chord_positions,
)

if TYPE_CHECKING:
    from chuk_mcp_dyads.harmony.substitutions import SubstitutionCandidate


# Guide tone priority by interval between the two notes.
# 3rds and 7ths define chord quality and are most important.
INTERVAL_PRIORITY: dict[int, int] = {
    3: 10,  # m3 - minor quality
    4: 10,  # M3 - major quality
    10: 9,  # m7
    11: 9,  # M7
    6: 8,  # TT - dominant resolution
    7: 5,  # P5
    8: 4,  # m6
    9: 4,  # M6
    5: 3,  # P4
    2: 2,  # M2
    1: 1,  # m2
    0: 0,  # unison
}


@dataclass(frozen=True)
class Dyad:
    """
    A two-note voicing under one bar.

    Positions are stored lower string first. The interval is measured
    from the lower-string note up to the higher-string note.
    """

    lower: FretPosition
    upper: FretPosition
    interval: int
    interval_name: str
    type: DyadType
    priority: int
    source: DyadSource

    @property
    def min_fret(self) -> int:
        """Lowest fret touched by the bar."""
        return min(self.lower.fret, self.upper.fret)

    @property
    def fret_diff(self) -> int:
        """Slant of the bar in frets."""
        return abs(self.lower.fret - self.upper.fret)

    @property
    def strings(self) -> tuple[int, int]:
        """String indices, lower first."""
        return (self.lower.string, self.upper.string)

    @property
    def coordinates(self) -> tuple[tuple[int, int], tuple[int, int]]:
        """(string, fret) of both notes."""
        return (self.lower.coordinate, self.upper.coordinate)

    @property
    def pitches(self) -> tuple[PitchClass, PitchClass]:
        """Pitch classes, lower string first."""
        return (self.lower.pitch, self.upper.pitch)

    @property
    def lever_positions(self) -> list[int]:
        """Which notes (1 = lower, 2 = upper) sound through an engaged lever."""
        return [i for i, pos in ((1, self.lower), (2, self.upper)) if pos.engaged]

    def as_substitute(self, candidate: SubstitutionCandidate) -> SubstituteDyad:
        """Return a copy annotated with the substitute chord it voices."""
        source = (
            DyadSource.TRITONE_SUBSTITUTE
            if candidate.kind == SubstitutionKind.TRITONE
            else DyadSource.DIATONIC_SUBSTITUTE
        )
        return SubstituteDyad(
            lower=self.lower,
            upper=self.upper,
            interval=self.interval,
            interval_name=self.interval_name,
            type=self.type,
            priority=self.priority,
            source=source,
            substitute_chord=candidate.chord_symbol,
            substitute_degree=candidate.degree_label,
        )

    def describe(self) -> str:
        """Hover text: notes, interval, bar type, fret(s) and provenance."""
        frets = f"fret {self.min_fret}"
        if self.type == DyadType.SLANT:
            frets += f"-{self.min_fret + self.fret_diff}"
        parts = [
            f"{self.lower.pitch.spell()}-{self.upper.pitch.spell()}",
            self.interval_name,
            self.type.value,
            frets,
        ]
        if self.source == DyadSource.ALTERED:
            parts.append("lever")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly form for display consumers."""
        return {
            "pos1": _position_dict(self.lower),
            "pos2": _position_dict(self.upper),
            "interval": self.interval,
            "interval_name": self.interval_name,
            "type": self.type.value,
            "priority": self.priority,
            "source": self.source.value,
            "lever_positions": self.lever_positions or None,
            "label": self.describe(),
        }


@dataclass(frozen=True)
class SubstituteDyad(Dyad):
    """A dyad found for a substitute chord, with the chord it belongs to."""

    substitute_chord: str
    substitute_degree: str

    def describe(self) -> str:
        return f"{super().describe()} {self.substitute_chord} ({self.substitute_degree})"

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["substitution"] = {
            "chord": self.substitute_chord,
            "degree": self.substitute_degree,
        }
        return data


def _position_dict(pos: FretPosition) -> dict[str, Any]:
    return {
        "string": pos.string,
        "fret": pos.fret,
        "note": pos.pitch.spell(),
        "lever": pos.engaged,
    }


def _dyad_sort_key(dyad: Dyad) -> tuple[int, int]:
    return (dyad.min_fret, dyad.lower.string)


def pair_positions(
    positions: Sequence[FretPosition],
    max_slant: int = DEFAULT_MAX_SLANT,
) -> list[Dyad]:
    """
    Form every valid dyad from a list of positions.

    Args:
        positions: Candidate positions (may repeat across chord tones)
        max_slant: Maximum fret difference for slanted dyads

    Returns:
        Deduplicated dyads ordered by lowest fret, then lower string
    """
    dyads: list[Dyad] = []
    seen: set[tuple[int, int, int, int, bool, bool]] = set()

    for i, first in enumerate(positions):
        for second in positions[i + 1 :]:
            if first.string == second.string:
                continue

            fret_diff = abs(first.fret - second.fret)
            if fret_diff > max_slant:
                continue

            lower, upper = (first, second) if first.string < second.string else (second, first)
            key = (lower.string, lower.fret, upper.string, upper.fret, lower.engaged, upper.engaged)
            if key in seen:
                continue
            seen.add(key)

            interval = interval_between(lower.pitch, upper.pitch)
            altered = lower.engaged or upper.engaged
            dyads.append(
                Dyad(
                    lower=lower,
                    upper=upper,
                    interval=interval,
                    interval_name=interval_label(interval),
                    type=DyadType.STRAIGHT if fret_diff == 0 else DyadType.SLANT,
                    priority=INTERVAL_PRIORITY[interval],
                    source=DyadSource.ALTERED if altered else DyadSource.DIRECT,
                )
            )

    dyads.sort(key=_dyad_sort_key)
    return dyads


def find_dyads(
    tones: Sequence[PitchClass],
    max_slant: int = DEFAULT_MAX_SLANT,
    tuning: Tuning = LAP_STEEL_TUNING,
    max_fret: int = DEFAULT_MAX_FRET,
    mechanisms: Sequence[AlteringMechanism] = (),
    use_mechanisms: bool = True,
) -> list[Dyad]:
    """
    Find all valid dyads for the given chord tones.

    Args:
        tones: Pitch classes of the chord
        max_slant: Maximum fret difference for slanted dyads (default 1)
        tuning: Open-string tuning (default G B D F# A D)
        max_fret: Maximum fret to search (default 24)
        mechanisms: Levers available on the instrument
        use_mechanisms: Whether levers may be engaged for this search

    Returns:
        Dyads ordered by lowest fret, then lower string index
    """
    levers = mechanisms if use_mechanisms else ()
    positions = chord_positions(tones, tuning, max_fret, mechanisms=levers)
    return pair_positions(positions, max_slant)


def filter_by_type(dyads: Iterable[Dyad], dyad_type: DyadType) -> list[Dyad]:
    """Keep only straight or only slant dyads."""
    return [d for d in dyads if d.type == dyad_type]


def filter_by_interval(dyads: Iterable[Dyad], intervals: Iterable[int]) -> list[Dyad]:
    """Keep dyads whose interval is one of the given semitone counts."""
    wanted = {i % 12 for i in intervals}
    return [d for d in dyads if d.interval in wanted]


def group_by_fret(dyads: Iterable[Dyad]) -> dict[int, list[Dyad]]:
    """Group dyads by their lowest fret, preserving order within groups."""
    groups: dict[int, list[Dyad]] = {}
    for dyad in dyads:
        groups.setdefault(dyad.min_fret, []).append(dyad)
    return groups
