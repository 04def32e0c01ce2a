"""
Chord explorer - the full query pipeline for one chord.

chord symbol -> chord tones -> dyads (with levers)
             -> substitute chords -> substitute dyads (no levers)
             -> optional guide tone selection over both
             -> straight/slant display toggles

Everything is recomputed per query; nothing is cached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chuk_mcp_dyads.constants import (
    DEFAULT_BASE_OCTAVES,
    DEFAULT_INSTRUMENT,
    DEFAULT_MAX_FRET,
    DEFAULT_MAX_SLANT,
    LAP_STEEL_TUNING_NAMES,
    DisplayMode,
    DyadType,
    GuideTonePolicy,
)
from chuk_mcp_dyads.core.chord import Chord
from chuk_mcp_dyads.core.scale import Degree
from chuk_mcp_dyads.dyads.search import Dyad, find_dyads
from chuk_mcp_dyads.dyads.selection import filter_guide_tones
from chuk_mcp_dyads.harmony.substitutions import (
    SubstitutionCandidate,
    dyads_for_candidates,
    substitutes_for,
)
from chuk_mcp_dyads.models.instrument import Instrument

logger = logging.getLogger(__name__)

LAP_STEEL = Instrument(
    name=DEFAULT_INSTRUMENT,
    description="Lap steel in G B D F# A D",
    tuning=list(LAP_STEEL_TUNING_NAMES),
    max_fret=DEFAULT_MAX_FRET,
    base_octaves=list(DEFAULT_BASE_OCTAVES),
)


@dataclass
class ChordExploration:
    """Result of exploring one chord on one instrument."""

    chord: Chord
    instrument: Instrument
    degree: Degree | None
    dyads: list[Dyad]
    substitutes: list[SubstitutionCandidate] = field(default_factory=list)

    @property
    def straight_count(self) -> int:
        """Number of straight-bar dyads."""
        return sum(1 for d in self.dyads if d.type == DyadType.STRAIGHT)

    @property
    def slant_count(self) -> int:
        """Number of slant-bar dyads."""
        return sum(1 for d in self.dyads if d.type == DyadType.SLANT)

    @property
    def title(self) -> str:
        """Display title, e.g. 'G7 (V)'."""
        if self.degree is None:
            return self.chord.symbol
        return f"{self.chord.symbol} ({self.degree.value})"


def explore_chord(
    symbol: str,
    instrument: Instrument | None = None,
    degree: Degree | None = None,
    display: DisplayMode = DisplayMode.ALL,
    policy: GuideTonePolicy = GuideTonePolicy.WEIGHTED,
    fret_proximity: int | None = None,
    max_slant: int = DEFAULT_MAX_SLANT,
    use_levers: bool = True,
    show_straight: bool = True,
    show_slant: bool = True,
) -> ChordExploration:
    """
    Find the dyads for a chord symbol, optionally with its substitutes.

    Args:
        symbol: Chord symbol, e.g. 'G7'
        instrument: Tuning preset (default: G B D F# A D lap steel)
        degree: Degree of the chord in its key; enables substitutes
        display: ALL dyads or only GUIDE tones
        policy: Guide tone policy when display is GUIDE
        fret_proximity: Overlap distance override for guide tone selection
        max_slant: Maximum fret difference of a slant bar
        use_levers: Whether levers may be engaged for the chord itself
        show_straight: Include straight-bar dyads
        show_slant: Include slant-bar dyads

    Returns:
        ChordExploration with the dyads ordered by lowest fret

    Raises:
        InvalidPitchError, UnknownChordQualityError: If the symbol is invalid
    """
    chord = Chord.parse(symbol)
    inst = instrument or LAP_STEEL
    tuning = inst.get_tuning()

    dyads: list[Dyad] = find_dyads(
        chord.tones,
        max_slant,
        tuning,
        inst.max_fret,
        mechanisms=inst.get_mechanisms(),
        use_mechanisms=use_levers,
    )
    logger.debug(f"{chord.symbol} on {inst.name}: {len(dyads)} dyads")

    candidates: list[SubstitutionCandidate] = []
    if degree is not None:
        candidates = substitutes_for(chord.root, degree)
        sub_dyads = dyads_for_candidates(candidates, max_slant, tuning, inst.max_fret)
        logger.debug(f"{len(candidates)} substitutes, {len(sub_dyads)} substitute dyads")
        dyads = dyads + list(sub_dyads)

    if display == DisplayMode.GUIDE:
        dyads = filter_guide_tones(dyads, chord.root, fret_proximity, policy)
        logger.debug(f"Guide tones ({policy.value}): {len(dyads)} dyads kept")

    dyads = [
        d
        for d in dyads
        if (d.type == DyadType.STRAIGHT and show_straight)
        or (d.type == DyadType.SLANT and show_slant)
    ]

    return ChordExploration(
        chord=chord,
        instrument=inst,
        degree=degree,
        dyads=dyads,
        substitutes=candidates,
    )
