"""
MCP tool implementations.

Tools are organized by domain:
- chords - Chord expansion, tuning parsing, substitutions
- dyads - Dyad search and guide tones
- instruments - Tuning presets
- playback - MIDI export
"""

from chuk_mcp_dyads.tools.chords import register_chord_tools
from chuk_mcp_dyads.tools.dyads import register_dyad_tools
from chuk_mcp_dyads.tools.instruments import register_instrument_tools
from chuk_mcp_dyads.tools.playback import register_playback_tools

__all__ = [
    "register_chord_tools",
    "register_dyad_tools",
    "register_instrument_tools",
    "register_playback_tools",
]
