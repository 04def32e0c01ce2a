"""
MIDI playback - a TonePlayer that writes what it hears to a MIDI file.

Instead of sounding notes, MidiTonePlayer records each tone on a tick
timeline. The recording renders to a mido MidiFile, so a dyad (or a run
of dyads) can be auditioned in any MIDI player. Same tones, same file.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from mido import Message, MetaMessage, MidiFile, MidiTrack, bpm2tempo

from chuk_mcp_dyads.core.pitch import PitchClass

from .tones import ToneEnvelope

TICKS_PER_BEAT = 480

# General MIDI "Acoustic Guitar (steel)", 0-based
STEEL_GUITAR_PROGRAM = 25


@dataclass(frozen=True)
class RecordedTone:
    """One tone on the tick timeline (note number, onset, length, velocity)."""

    note: int
    start: int
    length: int
    velocity: int
    channel: int = 0

    def __post_init__(self) -> None:
        for field_name, value, high in (
            ("note", self.note, 127),
            ("velocity", self.velocity, 127),
            ("channel", self.channel, 15),
        ):
            if not 0 <= value <= high:
                raise ValueError(f"{field_name} out of range 0-{high}: {value}")
        if self.start < 0 or self.length < 0:
            raise ValueError(f"Tone start and length must be >= 0, got {self.start}/{self.length}")

    @property
    def end(self) -> int:
        return self.start + self.length


def tones_to_midi(
    tones: Iterable[RecordedTone],
    tempo_bpm: int = 120,
    program: int | None = STEEL_GUITAR_PROGRAM,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> MidiFile:
    """
    Render recorded tones to a single-track MIDI file.

    Args:
        tones: Tones in any order
        tempo_bpm: Tempo written to the file
        program: GM program selected on channel 0, or None to leave it unset
        ticks_per_beat: Timeline resolution

    Returns:
        MidiFile ready to save
    """
    track = MidiTrack([MetaMessage("set_tempo", tempo=bpm2tempo(tempo_bpm), time=0)])
    if program is not None:
        track.append(Message("program_change", program=program, time=0))

    # (tick, 0 = release / 1 = attack, message); releases sort first at a shared tick
    timeline: list[tuple[int, int, Message]] = []
    for tone in tones:
        attack = Message(
            "note_on", channel=tone.channel, note=tone.note, velocity=tone.velocity
        )
        timeline.append((tone.start, 1, attack))
        timeline.append(
            (tone.end, 0, Message("note_off", channel=tone.channel, note=tone.note, velocity=0))
        )
    timeline.sort(key=lambda item: (item[0], item[1]))

    previous = 0
    for tick, _, message in timeline:
        track.append(message.copy(time=tick - previous))
        previous = tick
    track.append(MetaMessage("end_of_track", time=0))

    midi = MidiFile(ticks_per_beat=ticks_per_beat)
    midi.tracks.append(track)
    return midi


def seconds_to_ticks(seconds: float, tempo_bpm: int, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """Convert a duration in seconds to ticks at a tempo."""
    return round(seconds * tempo_bpm / 60 * ticks_per_beat)


def volume_to_velocity(volume: float) -> int:
    """Map a 0-1 volume onto MIDI velocity, clamped to 0-127."""
    return max(0, min(127, int(volume * 127)))


class MidiTonePlayer:
    """
    TonePlayer that records tones instead of sounding them.

    Tones start at the cursor; call `advance` between dyads.
    MIDI has no per-note envelope, so only duration and volume are kept.
    """

    def __init__(self, tempo_bpm: int = 120, channel: int = 0) -> None:
        self.tempo_bpm = tempo_bpm
        self.channel = channel
        self.cursor_ticks = 0
        self.tones: list[RecordedTone] = []

    def play_tone(self, pitch: PitchClass, octave: int, envelope: ToneEnvelope) -> None:
        self.tones.append(
            RecordedTone(
                note=pitch.to_midi(octave),
                start=self.cursor_ticks,
                length=seconds_to_ticks(envelope.duration, self.tempo_bpm),
                velocity=volume_to_velocity(envelope.volume),
                channel=self.channel,
            )
        )

    def advance(self, seconds: float) -> None:
        """Move the cursor forward."""
        self.cursor_ticks += seconds_to_ticks(seconds, self.tempo_bpm)

    def to_midi(self) -> MidiFile:
        """Render everything recorded so far."""
        return tones_to_midi(self.tones, tempo_bpm=self.tempo_bpm)
