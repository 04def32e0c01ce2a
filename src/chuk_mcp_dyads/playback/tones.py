"""
Tone playback contract.

The core never plays sound itself. Callers inject a TonePlayer; a dyad is
two fire-and-forget play_tone calls, one per note.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Protocol

from chuk_mcp_dyads.constants import DEFAULT_BASE_OCTAVES, FALLBACK_OCTAVE
from chuk_mcp_dyads.core.pitch import PitchClass
from chuk_mcp_dyads.dyads.search import Dyad

# Concert pitch
A4_FREQUENCY = 440.0

# Dyad notes are played quieter to avoid clipping
DYAD_VOLUME_SCALE = 0.7


@dataclass(frozen=True)
class ToneEnvelope:
    """Envelope of a single tone. Times in seconds, volume 0-1."""

    duration: float = 1.5
    attack: float = 0.02
    release: float = 0.8
    volume: float = 0.3
    waveform: str = "triangle"

    def __post_init__(self) -> None:
        if self.duration <= 0:
            raise ValueError(f"Duration must be > 0, got {self.duration}")
        if not 0.0 <= self.volume <= 1.0:
            raise ValueError(f"Volume must be 0-1, got {self.volume}")


class TonePlayer(Protocol):
    """Anything that can sound a pitch class at an octave."""

    def play_tone(self, pitch: PitchClass, octave: int, envelope: ToneEnvelope) -> None:
        """Start a tone. Must not block."""
        ...


def note_to_frequency(pitch: PitchClass, octave: int = 3) -> float:
    """Frequency in Hz of a pitch class at an octave (A4 = 440)."""
    semitones_from_a4 = pitch.value - PitchClass.A.value + (octave - 4) * 12
    return A4_FREQUENCY * 2 ** (semitones_from_a4 / 12)


def octave_for_position(
    string: int,
    fret: int,
    base_octaves: Sequence[int] = DEFAULT_BASE_OCTAVES,
) -> int:
    """
    Estimate the octave of a string/fret position.

    Each string has a base octave; every 12 frets add one.
    Strings beyond the table fall back to octave 3.
    """
    base = base_octaves[string] if 0 <= string < len(base_octaves) else FALLBACK_OCTAVE
    return base + fret // 12


def play_dyad(
    player: TonePlayer,
    dyad: Dyad,
    envelope: ToneEnvelope | None = None,
    base_octaves: Sequence[int] = DEFAULT_BASE_OCTAVES,
) -> None:
    """Play both notes of a dyad at a reduced volume."""
    env = envelope or ToneEnvelope()
    dyad_env = replace(env, volume=env.volume * DYAD_VOLUME_SCALE)
    for pos in (dyad.lower, dyad.upper):
        octave = octave_for_position(pos.string, pos.fret, base_octaves)
        player.play_tone(pos.pitch, octave, dyad_env)
