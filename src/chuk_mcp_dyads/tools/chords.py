"""
Chord tools - MCP tools for the pitch model and substitutions.

Tools for expanding chord symbols, parsing tunings and listing
substitute chords for a degree.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_dyads.core import Chord, Degree, Key
from chuk_mcp_dyads.fretboard import parse_tuning
from chuk_mcp_dyads.harmony import substitutes_for

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_chord_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register chord and tuning tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def dyads_expand_chord(chord: str) -> str:
        """
        Expand a chord symbol into its root and chord tones.

        Args:
            chord: Chord symbol (e.g., 'C', 'Am7', 'F#dim', 'Bbmaj9')

        Returns:
            JSON string with root, quality, tones and guide tones

        Example:
            dyads_expand_chord(chord="Am7")
        """
        try:
            parsed = Chord.parse(chord)
            quality = parsed.quality
            guide_tones = [
                parsed.root.transpose(offset).spell()
                for offset in (quality.third, quality.seventh)
                if offset is not None
            ]

            return json.dumps(
                {
                    "status": "success",
                    "chord": {
                        "symbol": parsed.symbol,
                        "root": parsed.root.spell(),
                        "quality": quality.name,
                        "tones": [t.spell() for t in parsed.tones],
                        "offsets": list(parsed.offsets),
                        "guide_tones": guide_tones,
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to expand chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["dyads_expand_chord"] = dyads_expand_chord

    @mcp.tool  # type: ignore[arg-type]
    async def dyads_parse_tuning(tuning: str) -> str:
        """
        Parse a custom tuning string.

        Notes are listed lowest string first, separated by spaces or commas.
        Between 2 and 12 strings are accepted.

        Args:
            tuning: Tuning string (e.g., 'G B D F# A D' or 'C,E,G,A,C,E')

        Returns:
            JSON string with the normalized tuning

        Example:
            dyads_parse_tuning(tuning="G B D F# A D")
        """
        try:
            parsed = parse_tuning(tuning)

            return json.dumps(
                {
                    "status": "success",
                    "tuning": parsed.names(),
                    "strings": len(parsed),
                }
            )
        except Exception as e:
            logger.exception("Failed to parse tuning")
            return json.dumps({"status": "error", "message": str(e)})

    tools["dyads_parse_tuning"] = dyads_parse_tuning

    @mcp.tool  # type: ignore[arg-type]
    async def dyads_substitutions(chord: str, degree: str) -> str:
        """
        List substitute chords for a chord played as a given degree.

        Diatonic substitutes share harmonic function in the implied major key.
        A chord played as V also gets its tritone substitute (bII7).

        Args:
            chord: Chord symbol (only the root is used)
            degree: Degree of the chord ('I', 'ii', 'iii', 'IV', 'V', 'vi', 'vii°')

        Returns:
            JSON string with the implied key and substitute chords

        Example:
            dyads_substitutions(chord="G7", degree="V")
        """
        try:
            parsed = Chord.parse(chord)
            deg = Degree.parse(degree)
            candidates = substitutes_for(parsed.root, deg)

            return json.dumps(
                {
                    "status": "success",
                    "chord": parsed.symbol,
                    "degree": deg.value,
                    "key": str(Key.from_chord(parsed.root, deg)),
                    "substitutes": [
                        {
                            "degree": c.degree_label,
                            "chord": c.chord_symbol,
                            "tones": [t.spell() for t in c.tones],
                            "kind": c.kind.value,
                        }
                        for c in candidates
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to find substitutions")
            return json.dumps({"status": "error", "message": str(e)})

    tools["dyads_substitutions"] = dyads_substitutions

    return tools
