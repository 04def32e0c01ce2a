"""
Playback tools - MCP tools for MIDI export.

Tools for rendering dyads to MIDI files so they can be auditioned.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_dyads.constants import DisplayMode, ErrorMessages, SuccessMessages
from chuk_mcp_dyads.core import Degree
from chuk_mcp_dyads.explorer import explore_chord
from chuk_mcp_dyads.instruments import InstrumentLoader
from chuk_mcp_dyads.playback import MidiTonePlayer, ToneEnvelope, play_dyad
from chuk_mcp_dyads.tools.dyads import resolve_instrument

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_playback_tools(
    mcp: ChukMCPServer,
    loader: InstrumentLoader,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register playback/export tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The instrument loader
        output_dir: Directory for output files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def dyads_export_midi(
        chord: str,
        index: int | None = None,
        instrument: str | None = None,
        tuning: str | None = None,
        degree: str | None = None,
        display: str = "all",
        duration: float = 1.5,
        gap: float = 0.25,
        output_name: str | None = None,
    ) -> str:
        """
        Render dyads of a chord to a MIDI file.

        With an index, only that dyad (as listed by dyads_find with the same
        arguments) is rendered; otherwise every dyad is played in fret order.

        Args:
            chord: Chord symbol
            index: Optional position of a single dyad in the result list
            instrument: Instrument preset name (default 'c6-gbdfad')
            tuning: Custom tuning string, overrides instrument
            degree: Degree of the chord in its key, enables substitutes
            display: 'all' or 'guide'
            duration: Length of each dyad in seconds
            gap: Silence between dyads in seconds
            output_name: Optional output filename (without .mid extension)

        Returns:
            JSON string with the file path and rendered dyads

        Example:
            dyads_export_midi(chord="G7", display="guide")
        """
        try:
            inst = resolve_instrument(loader, instrument, tuning)
            result = explore_chord(
                chord,
                instrument=inst,
                degree=Degree.parse(degree) if degree else None,
                display=DisplayMode(display),
            )

            dyads = result.dyads
            if index is not None:
                if not 0 <= index < len(dyads):
                    return json.dumps(
                        {
                            "status": "error",
                            "message": ErrorMessages.DYAD_INDEX_OUT_OF_RANGE.format(
                                index=index, count=len(dyads)
                            ),
                        }
                    )
                dyads = [dyads[index]]

            player = MidiTonePlayer()
            envelope = ToneEnvelope(duration=duration)
            for dyad in dyads:
                play_dyad(player, dyad, envelope, inst.get_base_octaves())
                player.advance(duration + gap)

            filename = f"{output_name or result.chord.symbol.replace('#', 's')}.mid"
            output_path = output_dir / filename
            output_dir.mkdir(parents=True, exist_ok=True)
            player.to_midi().save(str(output_path))

            label = dyads[0].describe() if len(dyads) == 1 else f"{len(dyads)} dyads"
            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "dyads": [d.describe() for d in dyads],
                    "notes": len(player.tones),
                    "message": SuccessMessages.MIDI_EXPORTED.format(dyad=label, path=output_path),
                }
            )
        except Exception as e:
            logger.exception("Failed to export MIDI")
            return json.dumps({"status": "error", "message": str(e)})

    tools["dyads_export_midi"] = dyads_export_midi

    return tools
