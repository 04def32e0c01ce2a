"""
Guide tone selection - reduce a dyad list to its harmonically essential subset.

Two steps:
1. A policy scores dyads relative to the chord root and drops the ones
   that add no harmonic information.
2. Overlap-aware greedy selection keeps the best-scoring dyads that do not
   crowd each other on the fretboard.

The overlap relation is not transitive: A overlapping B and B overlapping C
says nothing about A and C. Selection order therefore decides the result.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from enum import Enum

from chuk_mcp_dyads.constants import (
    DEFAULT_FRET_PROXIMITY,
    WEIGHTED_SCORE_THRESHOLD,
    GuideTonePolicy,
)
from chuk_mcp_dyads.core.pitch import PitchClass, interval_between

from .search import Dyad


class NoteRole(str, Enum):
    """Functional role of a note relative to the chord root."""

    THIRD = "third"
    SEVENTH = "seventh"
    NONE = "none"


# Importance of a note by its interval above the root
NOTE_IMPORTANCE: dict[int, int] = {
    3: 10,  # m3
    4: 10,  # M3
    10: 9,  # m7
    11: 9,  # M7
    0: 6,  # root
    1: 4,  # b9
    2: 4,  # 9
    8: 3,  # b13 / #5
    9: 3,  # 13 / 6
    5: 3,  # 11
    6: 3,  # #11 / b5
    7: 2,  # 5th
}

# Intervals kept by the interval-priority policy: 3rds, tritone, 7ths
GUIDE_TONE_INTERVALS: frozenset[int] = frozenset({3, 4, 6, 10, 11})


def note_role(pitch: PitchClass, root: PitchClass) -> NoteRole:
    """Classify a note as the chord's third, seventh, or neither."""
    semitones = interval_between(root, pitch)
    if semitones in (3, 4):
        return NoteRole.THIRD
    if semitones in (10, 11):
        return NoteRole.SEVENTH
    return NoteRole.NONE


def note_importance(pitch: PitchClass, root: PitchClass) -> int:
    """Importance score of a single note relative to the root."""
    return NOTE_IMPORTANCE.get(interval_between(root, pitch), 0)


def dyad_score(dyad: Dyad, root: PitchClass) -> int:
    """Combined importance of both notes of a dyad."""
    return note_importance(dyad.lower.pitch, root) + note_importance(dyad.upper.pitch, root)


def is_role_pair(dyad: Dyad, root: PitchClass) -> bool:
    """True when the dyad is exactly one third plus one seventh."""
    roles = {note_role(dyad.lower.pitch, root), note_role(dyad.upper.pitch, root)}
    return roles == {NoteRole.THIRD, NoteRole.SEVENTH}


def is_redundant(dyad: Dyad, root: PitchClass) -> bool:
    """True when both notes play the same role (same interval from root)."""
    return interval_between(root, dyad.lower.pitch) == interval_between(root, dyad.upper.pitch)


def dyads_overlap(a: Dyad, b: Dyad, fret_proximity: int = 2) -> bool:
    """
    Check whether two dyads crowd each other.

    They overlap when they share a (string, fret) coordinate, or when their
    lowest frets are within `fret_proximity` and they share a string.
    """
    if set(a.coordinates) & set(b.coordinates):
        return True

    frets_close = abs(a.min_fret - b.min_fret) <= fret_proximity
    strings_shared = bool(set(a.strings) & set(b.strings))
    return frets_close and strings_shared


def select_non_overlapping(
    dyads: Sequence[Dyad],
    score: Callable[[Dyad], int],
    fret_proximity: int,
) -> list[Dyad]:
    """
    Greedily pick the best dyads that do not overlap.

    Candidates are visited by descending score, ties by ascending lowest
    fret (then input order). A candidate is kept only if it overlaps none
    of the dyads already kept.

    Returns:
        Kept dyads ordered by lowest fret
    """
    ranked = sorted(dyads, key=lambda d: (-score(d), d.min_fret))

    selected: list[Dyad] = []
    for candidate in ranked:
        if not any(dyads_overlap(candidate, s, fret_proximity) for s in selected):
            selected.append(candidate)

    selected.sort(key=lambda d: d.min_fret)
    return selected


def filter_guide_tones(
    dyads: Iterable[Dyad],
    root: PitchClass | None = None,
    fret_proximity: int | None = None,
    policy: GuideTonePolicy = GuideTonePolicy.WEIGHTED,
) -> list[Dyad]:
    """
    Filter dyads down to guide tones, removing clutter from overlapping positions.

    Args:
        dyads: Dyads to filter (direct and substitute dyads may be mixed)
        root: Reference chord root; required by ROLE_PAIR and WEIGHTED
        fret_proximity: Overlap distance in frets (default depends on policy)
        policy: Which guide tone policy to apply

    Returns:
        Selected dyads ordered by lowest fret, or [] if the policy
        needs a root and none was given
    """
    proximity = DEFAULT_FRET_PROXIMITY[policy] if fret_proximity is None else fret_proximity
    candidates = list(dyads)

    if policy == GuideTonePolicy.INTERVAL_PRIORITY:
        kept = [d for d in candidates if d.interval in GUIDE_TONE_INTERVALS]
        return select_non_overlapping(kept, lambda d: d.priority, proximity)

    if root is None:
        return []

    def score(d: Dyad) -> int:
        return dyad_score(d, root)

    if policy == GuideTonePolicy.ROLE_PAIR:
        kept = [d for d in candidates if is_role_pair(d, root)]
    else:
        kept = [
            d
            for d in candidates
            if not is_redundant(d, root) and score(d) >= WEIGHTED_SCORE_THRESHOLD
        ]

    return select_non_overlapping(kept, score, proximity)
