#!/usr/bin/env python3
"""
Async Dyads MCP Server using chuk-mcp-server

This server provides MCP tools for finding two-note voicings (dyads) on
a lap steel or any other fretted instrument played with a bar. Tuning
presets are YAML files you can copy into your project and customize.

The server provides tools for:
- Expanding chord symbols and parsing tunings
- Finding straight and slant bar dyads for a chord
- Reducing dyads to guide tones
- Substitute chords for a degree (diatonic and tritone)
- Managing instrument presets
- Rendering dyads to MIDI files
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_dyads.instruments import InstrumentLoader
from chuk_mcp_dyads.server import INSTRUMENTS_DIR_ENV, OUTPUT_DIR_ENV
from chuk_mcp_dyads.tools import (
    register_chord_tools,
    register_dyad_tools,
    register_instrument_tools,
    register_playback_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-dyads")

# Paths - project directories relative to cwd unless overridden by the CLI
BASE_PATH = Path.cwd()
INSTRUMENTS_DIR = Path(os.environ.get(INSTRUMENTS_DIR_ENV, BASE_PATH / "instruments"))
OUTPUT_DIR = Path(os.environ.get(OUTPUT_DIR_ENV, BASE_PATH / "output"))
LIBRARY_PATH = Path(__file__).parent / "instruments" / "library"

# Create loader
instrument_loader = InstrumentLoader(
    library_path=LIBRARY_PATH,
    project_path=INSTRUMENTS_DIR,
)

# Register all tools
chord_tools = register_chord_tools(mcp)
dyad_tools = register_dyad_tools(mcp, instrument_loader)
instrument_tools = register_instrument_tools(mcp, instrument_loader)
playback_tools = register_playback_tools(mcp, instrument_loader, OUTPUT_DIR)

# Export tool functions for direct access
dyads_expand_chord = chord_tools["dyads_expand_chord"]
dyads_parse_tuning = chord_tools["dyads_parse_tuning"]
dyads_substitutions = chord_tools["dyads_substitutions"]

dyads_find = dyad_tools["dyads_find"]
dyads_guide_tones = dyad_tools["dyads_guide_tones"]

dyads_list_instruments = instrument_tools["dyads_list_instruments"]
dyads_describe_instrument = instrument_tools["dyads_describe_instrument"]
dyads_create_instrument = instrument_tools["dyads_create_instrument"]
dyads_copy_instrument_to_project = instrument_tools["dyads_copy_instrument_to_project"]

dyads_export_midi = playback_tools["dyads_export_midi"]

logger.info("CHUK Dyads MCP Server initialized")
logger.info(f"  Library path: {LIBRARY_PATH}")
logger.info(f"  Instruments dir: {INSTRUMENTS_DIR}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
