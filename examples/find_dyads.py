#!/usr/bin/env python3
"""
Example: Find dyads for a chord on a lap steel.

This demonstrates the fretboard search - every two-note voicing a single
bar can stop - and how guide tone selection trims it down.

Usage:
    python examples/find_dyads.py
"""

from chuk_mcp_dyads.constants import DisplayMode, GuideTonePolicy
from chuk_mcp_dyads.dyads import group_by_fret
from chuk_mcp_dyads.explorer import explore_chord
from chuk_mcp_dyads.instruments import InstrumentLoader


def main() -> None:
    """Print dyads for a few chords."""
    # Example 1: Every dyad of C major on G B D F# A D, grouped by fret
    print("C major, all dyads (frets 0-7):")
    result = explore_chord("C")
    for fret, dyads in group_by_fret(result.dyads).items():
        if fret > 7:
            break
        for dyad in dyads:
            print(f"  {dyad.describe()}")
    print(f"  ... {result.straight_count} straight, {result.slant_count} slant in total")

    # Example 2: The same chord reduced to guide tones, under each policy
    print("\nCmaj7 guide tones:")
    for policy in GuideTonePolicy:
        guide = explore_chord("Cmaj7", display=DisplayMode.GUIDE, policy=policy)
        print(f"  {policy.value}: {len(guide.dyads)} dyads")
        for dyad in guide.dyads[:3]:
            print(f"    {dyad.describe()}")

    # Example 3: A lever preset - engaged strings show up as 'lever'
    print("\nC major with knee levers:")
    loader = InstrumentLoader()
    levers = loader.get_instrument("c6-gbdfad-levers")
    result = explore_chord("C", instrument=levers)
    for dyad in result.dyads:
        if dyad.lever_positions:
            print(f"  {dyad.describe()}")


if __name__ == "__main__":
    main()
