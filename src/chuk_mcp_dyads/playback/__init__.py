"""
Playback - the tone contract and a MIDI-recording player.
"""

from chuk_mcp_dyads.playback.midi import (
    TICKS_PER_BEAT,
    MidiTonePlayer,
    RecordedTone,
    seconds_to_ticks,
    tones_to_midi,
    volume_to_velocity,
)
from chuk_mcp_dyads.playback.tones import (
    ToneEnvelope,
    TonePlayer,
    note_to_frequency,
    octave_for_position,
    play_dyad,
)

__all__ = [
    "TICKS_PER_BEAT",
    "MidiTonePlayer",
    "RecordedTone",
    "ToneEnvelope",
    "TonePlayer",
    "note_to_frequency",
    "octave_for_position",
    "play_dyad",
    "seconds_to_ticks",
    "tones_to_midi",
    "volume_to_velocity",
]
