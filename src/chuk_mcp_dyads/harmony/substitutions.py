"""
Chord substitutions - chords that can stand in for a given degree.

Diatonic substitutes share harmonic function within the implied major key.
The tritone substitute (bII7) replaces V7: both share the same tritone,
with 3rd and 7th swapping roles.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from chuk_mcp_dyads.constants import (
    DEFAULT_MAX_FRET,
    DEFAULT_MAX_SLANT,
    TRITONE_SUBSTITUTE_LABEL,
    SubstitutionKind,
)
from chuk_mcp_dyads.core.chord import Chord, ChordQuality
from chuk_mcp_dyads.core.pitch import PitchClass
from chuk_mcp_dyads.core.scale import Degree, Key
from chuk_mcp_dyads.dyads.search import SubstituteDyad, find_dyads
from chuk_mcp_dyads.fretboard import LAP_STEEL_TUNING, Tuning

# Diatonic function substitutions
DIATONIC_SUBSTITUTIONS: dict[Degree, list[Degree]] = {
    Degree.I: [Degree.iii, Degree.vi],  # Tonic
    Degree.ii: [Degree.IV],  # Subdominant
    Degree.iii: [Degree.I, Degree.vi],  # Tonic
    Degree.IV: [Degree.ii, Degree.vi],  # Subdominant (vi shares two tones)
    Degree.V: [Degree.vii_dim],  # Dominant
    Degree.vi: [Degree.I, Degree.iii],  # Tonic
    Degree.vii_dim: [Degree.V],  # Dominant
}


@dataclass(frozen=True)
class SubstitutionCandidate:
    """A substitute chord, expanded to the tones the fretboard search needs."""

    degree_label: str
    chord_symbol: str
    tones: tuple[PitchClass, ...]
    kind: SubstitutionKind

    def __str__(self) -> str:
        return f"{self.chord_symbol} ({self.degree_label})"


def tonic_for(chord_root: PitchClass, degree: Degree) -> PitchClass:
    """
    Get the tonic implied by a chord root and its degree.

    Example: root A as vi -> tonic C
    """
    return Key.from_chord(chord_root, degree).tonic


def chord_for_degree(tonic: PitchClass, degree: Degree) -> Chord:
    """Build the diatonic chord of a degree in the key of `tonic`."""
    return Chord.parse(Key(tonic).chord_symbol(degree))


def tritone_substitute(dominant_root: PitchClass) -> Chord:
    """
    Get the tritone substitution for a dominant chord.

    Example: G7 (V of C) -> C#7 (bII7)
    """
    return Chord(dominant_root.transpose(6), ChordQuality.DOMINANT_7, "7")


def substitutes_for(chord_root: PitchClass, degree: Degree) -> list[SubstitutionCandidate]:
    """
    Get all substitute chords for a chord played as `degree`.

    Args:
        chord_root: Root of the chord being substituted
        degree: Its degree in the implied major key

    Returns:
        Diatonic substitutes in table order, then the tritone substitute (V only)
    """
    candidates: list[SubstitutionCandidate] = []
    tonic = tonic_for(chord_root, degree)

    for sub_degree in DIATONIC_SUBSTITUTIONS[degree]:
        chord = chord_for_degree(tonic, sub_degree)
        candidates.append(
            SubstitutionCandidate(
                degree_label=sub_degree.value,
                chord_symbol=chord.symbol,
                tones=tuple(chord.tones),
                kind=SubstitutionKind.DIATONIC,
            )
        )

    if degree == Degree.V:
        chord = tritone_substitute(chord_root)
        candidates.append(
            SubstitutionCandidate(
                degree_label=TRITONE_SUBSTITUTE_LABEL,
                chord_symbol=chord.symbol,
                tones=tuple(chord.tones),
                kind=SubstitutionKind.TRITONE,
            )
        )

    return candidates


def dyads_for_candidates(
    candidates: Sequence[SubstitutionCandidate],
    max_slant: int = DEFAULT_MAX_SLANT,
    tuning: Tuning = LAP_STEEL_TUNING,
    max_fret: int = DEFAULT_MAX_FRET,
) -> list[SubstituteDyad]:
    """
    Search dyads for each substitute chord, annotated with their provenance.

    Substitutes are searched on plain open/fretted positions only; levers
    are never engaged for them.
    """
    dyads: list[SubstituteDyad] = []
    for candidate in candidates:
        found = find_dyads(
            list(candidate.tones), max_slant, tuning, max_fret, use_mechanisms=False
        )
        dyads.extend(d.as_substitute(candidate) for d in found)
    return dyads


def find_substitution_dyads(
    chord_root: PitchClass,
    degree: Degree,
    max_slant: int = DEFAULT_MAX_SLANT,
    tuning: Tuning = LAP_STEEL_TUNING,
    max_fret: int = DEFAULT_MAX_FRET,
) -> list[SubstituteDyad]:
    """Find dyads for every substitute of a chord played as `degree`."""
    return dyads_for_candidates(substitutes_for(chord_root, degree), max_slant, tuning, max_fret)
