"""
Pydantic models for the dyad system.

This module provides:
- Instrument: Tuning preset with fret count, levers and octave table
- LeverSpec: A lever bound to one string
- InstrumentMetadata: Listing summary
"""

from chuk_mcp_dyads.models.instrument import Instrument, InstrumentMetadata, LeverSpec

__all__ = [
    "Instrument",
    "InstrumentMetadata",
    "LeverSpec",
]
