"""
Dyad tools - MCP tools for the fretboard search.

Tools for finding every playable dyad of a chord and for reducing
them to guide tones.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_dyads.constants import (
    DEFAULT_INSTRUMENT,
    DisplayMode,
    ErrorMessages,
    GuideTonePolicy,
)
from chuk_mcp_dyads.core import Degree
from chuk_mcp_dyads.explorer import ChordExploration, explore_chord
from chuk_mcp_dyads.fretboard import parse_tuning
from chuk_mcp_dyads.instruments import InstrumentLoader
from chuk_mcp_dyads.models import Instrument

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def resolve_instrument(
    loader: InstrumentLoader,
    instrument: str | None = None,
    tuning: str | None = None,
    max_fret: int | None = None,
) -> Instrument:
    """
    Pick the instrument for a query.

    A custom tuning string wins over a named instrument; with neither,
    the default lap steel preset is used.

    Raises:
        ValueError: If the named instrument does not exist
        InvalidTuningError: If the custom tuning is invalid
    """
    if tuning:
        inst = Instrument(name="custom", tuning=parse_tuning(tuning).names())
    else:
        name = instrument or DEFAULT_INSTRUMENT
        found = loader.get_instrument(name)
        if found is None:
            raise ValueError(ErrorMessages.INSTRUMENT_NOT_FOUND.format(name=name))
        inst = found

    if max_fret is not None:
        inst = Instrument.model_validate({**inst.model_dump(by_alias=True), "max_fret": max_fret})
    return inst


def exploration_to_dict(result: ChordExploration) -> dict[str, Any]:
    """Serialize an exploration for a tool response."""
    return {
        "chord": result.title,
        "tones": [t.spell() for t in result.chord.tones],
        "instrument": result.instrument.name,
        "tuning": list(result.instrument.tuning),
        "substitutes": [
            {"degree": c.degree_label, "chord": c.chord_symbol, "kind": c.kind.value}
            for c in result.substitutes
        ],
        "counts": {
            "total": len(result.dyads),
            "straight": result.straight_count,
            "slant": result.slant_count,
        },
        "dyads": [d.to_dict() for d in result.dyads],
    }


def register_dyad_tools(
    mcp: ChukMCPServer,
    loader: InstrumentLoader,
) -> dict[str, Any]:
    """
    Register dyad search tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The instrument loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def dyads_find(
        chord: str,
        instrument: str | None = None,
        tuning: str | None = None,
        degree: str | None = None,
        display: str = "all",
        policy: str = "weighted",
        max_slant: int = 1,
        max_fret: int | None = None,
        use_levers: bool = True,
        show_straight: bool = True,
        show_slant: bool = True,
    ) -> str:
        """
        Find every dyad a single bar can play for a chord.

        Straight bars stop both notes at one fret; slant bars stop them
        up to max_slant frets apart. With a degree, dyads for substitute
        chords are included too.

        Args:
            chord: Chord symbol (e.g., 'C', 'Am7', 'G7')
            instrument: Instrument preset name (default 'c6-gbdfad')
            tuning: Custom tuning string, overrides instrument (e.g., 'G B D F# A D')
            degree: Degree of the chord in its key, enables substitutes
            display: 'all' for every dyad, 'guide' for guide tones only
            policy: Guide tone policy ('weighted', 'role_pair', 'interval_priority')
            max_slant: Maximum fret difference of a slant bar
            max_fret: Highest fret searched (default from instrument)
            use_levers: Whether levers may be engaged
            show_straight: Include straight-bar dyads
            show_slant: Include slant-bar dyads

        Returns:
            JSON string with dyads ordered by fret

        Example:
            dyads_find(chord="G7", degree="V", display="guide")
        """
        try:
            inst = resolve_instrument(loader, instrument, tuning, max_fret)
            result = explore_chord(
                chord,
                instrument=inst,
                degree=Degree.parse(degree) if degree else None,
                display=DisplayMode(display),
                policy=GuideTonePolicy(policy),
                max_slant=max_slant,
                use_levers=use_levers,
                show_straight=show_straight,
                show_slant=show_slant,
            )

            return json.dumps({"status": "success", **exploration_to_dict(result)})
        except Exception as e:
            logger.exception("Failed to find dyads")
            return json.dumps({"status": "error", "message": str(e)})

    tools["dyads_find"] = dyads_find

    @mcp.tool  # type: ignore[arg-type]
    async def dyads_guide_tones(
        chord: str,
        instrument: str | None = None,
        tuning: str | None = None,
        degree: str | None = None,
        policy: str = "weighted",
        fret_proximity: int | None = None,
    ) -> str:
        """
        Find the essential, non-overlapping guide tone dyads of a chord.

        'weighted' keeps dyads whose notes score at least 8 by importance
        (3rds 10, 7ths 9, root 6, ...); 'role_pair' keeps strict 3rd + 7th
        pairs; 'interval_priority' ranks by the interval between the notes.

        Args:
            chord: Chord symbol (e.g., 'Cmaj7')
            instrument: Instrument preset name (default 'c6-gbdfad')
            tuning: Custom tuning string, overrides instrument
            degree: Degree of the chord in its key, enables substitutes
            policy: Guide tone policy
            fret_proximity: Frets within which dyads on a shared string crowd each other

        Returns:
            JSON string with the selected dyads ordered by fret

        Example:
            dyads_guide_tones(chord="Cmaj7", policy="role_pair")
        """
        try:
            inst = resolve_instrument(loader, instrument, tuning)
            guide_policy = GuideTonePolicy(policy)
            result = explore_chord(
                chord,
                instrument=inst,
                degree=Degree.parse(degree) if degree else None,
                display=DisplayMode.GUIDE,
                policy=guide_policy,
                fret_proximity=fret_proximity,
            )

            return json.dumps(
                {"status": "success", "policy": guide_policy.value, **exploration_to_dict(result)}
            )
        except Exception as e:
            logger.exception("Failed to find guide tones")
            return json.dumps({"status": "error", "message": str(e)})

    tools["dyads_guide_tones"] = dyads_guide_tones

    return tools
