#!/usr/bin/env python3
"""
Example: Render dyads to MIDI.

This demonstrates the playback contract: a dyad is two tones, handed to
a TonePlayer. MidiTonePlayer records them so they can be auditioned in
any MIDI player or DAW.

Usage:
    python examples/export_midi.py
    # Creates: examples/output/ii_v_i_guide_tones.mid
"""

from pathlib import Path

from chuk_mcp_dyads.constants import DisplayMode
from chuk_mcp_dyads.explorer import explore_chord
from chuk_mcp_dyads.playback import MidiTonePlayer, ToneEnvelope, play_dyad


def main() -> None:
    """Render the first guide tone dyads of a ii-V-I."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    player = MidiTonePlayer(tempo_bpm=90)
    envelope = ToneEnvelope(duration=1.0, volume=0.6)

    for symbol in ("Dm7", "G7", "Cmaj7"):
        result = explore_chord(symbol, display=DisplayMode.GUIDE)
        print(f"{symbol}:")
        # Two voicings per chord, one second each
        for dyad in result.dyads[:2]:
            print(f"  {dyad.describe()}")
            play_dyad(player, dyad, envelope, result.instrument.get_base_octaves())
            player.advance(1.0)

    path = output_dir / "ii_v_i_guide_tones.mid"
    player.to_midi().save(str(path))
    print(f"\nCreated: {path} ({len(player.tones)} notes)")


if __name__ == "__main__":
    main()
