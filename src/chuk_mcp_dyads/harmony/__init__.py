"""
Harmony - substitute chords for a degree in a key.
"""

from chuk_mcp_dyads.harmony.substitutions import (
    DIATONIC_SUBSTITUTIONS,
    SubstitutionCandidate,
    chord_for_degree,
    dyads_for_candidates,
    find_substitution_dyads,
    substitutes_for,
    tonic_for,
    tritone_substitute,
)

__all__ = [
    "DIATONIC_SUBSTITUTIONS",
    "SubstitutionCandidate",
    "chord_for_degree",
    "dyads_for_candidates",
    "find_substitution_dyads",
    "substitutes_for",
    "tonic_for",
    "tritone_substitute",
]
