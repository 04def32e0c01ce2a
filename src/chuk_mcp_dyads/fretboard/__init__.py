"""
Fretboard model - tunings, levers and the position resolver.
"""

from chuk_mcp_dyads.fretboard.resolver import (
    FretPosition,
    chord_positions,
    engaged_strings,
    note_at,
    positions_for,
)
from chuk_mcp_dyads.fretboard.tuning import (
    LAP_STEEL_TUNING,
    AlteringMechanism,
    Tuning,
    parse_tuning,
    validate_mechanisms,
)

__all__ = [
    "AlteringMechanism",
    "FretPosition",
    "LAP_STEEL_TUNING",
    "Tuning",
    "chord_positions",
    "engaged_strings",
    "note_at",
    "parse_tuning",
    "positions_for",
    "validate_mechanisms",
]
