#!/usr/bin/env python3
"""
Example: Substitute chords and their dyads.

For a chord played as a degree of a major key, list the diatonic
substitutes (and the tritone substitute for V), then the guide tone
dyads that voice them.

Usage:
    python examples/substitutions.py
"""

from chuk_mcp_dyads.constants import DisplayMode
from chuk_mcp_dyads.core import Chord, Degree, Key
from chuk_mcp_dyads.dyads import SubstituteDyad
from chuk_mcp_dyads.explorer import explore_chord
from chuk_mcp_dyads.harmony import substitutes_for

# ii-V-I in C, plus the relative minor
PROGRESSION = [("Dm", Degree.ii), ("G7", Degree.V), ("C", Degree.I), ("Am", Degree.vi)]


def main() -> None:
    """Print substitutes for a short progression."""
    for symbol, degree in PROGRESSION:
        chord = Chord.parse(symbol)
        key = Key.from_chord(chord.root, degree)
        candidates = substitutes_for(chord.root, degree)
        print(f"{symbol} as {degree.value} in {key}:")
        for candidate in candidates:
            tones = " ".join(t.spell() for t in candidate.tones)
            print(f"  {candidate}  [{tones}]")

    # Guide tones for G7 with its substitutes mixed in
    print("\nG7 (V) guide tones, including substitutes:")
    result = explore_chord("G7", degree=Degree.V, display=DisplayMode.GUIDE)
    for dyad in result.dyads:
        marker = "*" if isinstance(dyad, SubstituteDyad) else " "
        print(f" {marker} {dyad.describe()}")


if __name__ == "__main__":
    main()
