"""
Dyads - bar-playable two-note voicings and guide tone selection.

This module provides:
- Dyad / SubstituteDyad: A voicing and its provenance
- find_dyads: Geometry search over the fretboard
- filter_guide_tones: Policy scoring plus overlap-aware greedy selection
"""

from chuk_mcp_dyads.dyads.search import (
    INTERVAL_PRIORITY,
    Dyad,
    SubstituteDyad,
    filter_by_interval,
    filter_by_type,
    find_dyads,
    group_by_fret,
    pair_positions,
)
from chuk_mcp_dyads.dyads.selection import (
    NOTE_IMPORTANCE,
    NoteRole,
    dyad_score,
    dyads_overlap,
    filter_guide_tones,
    note_importance,
    note_role,
    select_non_overlapping,
)

__all__ = [
    # Search
    "INTERVAL_PRIORITY",
    "Dyad",
    "SubstituteDyad",
    "filter_by_interval",
    "filter_by_type",
    "find_dyads",
    "group_by_fret",
    "pair_positions",
    # Selection
    "NOTE_IMPORTANCE",
    "NoteRole",
    "dyad_score",
    "dyads_overlap",
    "filter_guide_tones",
    "note_importance",
    "note_role",
    "select_non_overlapping",
]
