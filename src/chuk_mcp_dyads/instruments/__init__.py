"""
Instrument presets - tunings you can copy into a project and customize.
"""

from chuk_mcp_dyads.instruments.loader import InstrumentLoader

__all__ = [
    "InstrumentLoader",
]
