"""
MIDI export - strummed voicings as MIDI files.

Voicings are converted to note events (one per sounded string, low
string first, slightly staggered like a downstroke) and written with
mido. All operations are deterministic: same input -> same output.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from mido import Message, MetaMessage, MidiFile, MidiTrack

from chuk_mcp_fretboard.core.tuning import Tuning
from chuk_mcp_fretboard.models.fretboard import ChordVoicing

# Standard ticks per beat (quarter note)
TICKS_PER_BEAT = 480

# Delay between strings in a strum (~50ms at 120 BPM)
STRUM_TICKS = 48

# Each chord rings for one 4/4 bar
CHORD_BEATS = 4

# GM program 25: Acoustic Guitar (nylon), 0-indexed
NYLON_GUITAR_PROGRAM = 24


@dataclass(frozen=True)
class MidiEvent:
    """
    A single MIDI note event.

    All times are in ticks (absolute from start of track).
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int  # Absolute start time in ticks
    duration_ticks: int  # Duration in ticks
    velocity: int  # 0-127
    channel: int = 0  # 0-15

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


def events_to_midi(
    events: Sequence[MidiEvent],
    tempo_bpm: int = 120,
    ticks_per_beat: int = TICKS_PER_BEAT,
    program: int = NYLON_GUITAR_PROGRAM,
) -> MidiFile:
    """
    Convert a sequence of MidiEvents to a single-track MidiFile.

    Args:
        events: Sequence of MidiEvent objects
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)
        program: GM program for channel 0

    Returns:
        A mido MidiFile ready to be saved
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    tempo_us = int(60_000_000 / tempo_bpm)
    track.append(MetaMessage("set_tempo", tempo=tempo_us, time=0))
    track.append(Message("program_change", channel=0, program=program, time=0))

    messages: list[tuple[int, Message]] = []
    for event in events:
        messages.append(
            (
                event.start_ticks,
                Message(
                    "note_on",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=event.velocity,
                    time=0,
                ),
            )
        )
        messages.append(
            (
                event.start_ticks + event.duration_ticks,
                Message("note_off", channel=event.channel, note=event.pitch, velocity=0, time=0),
            )
        )

    # note_off before note_on at the same tick so repeated notes retrigger cleanly
    messages.sort(key=lambda x: (x[0], x[1].type != "note_off"))

    current_time = 0
    for abs_time, msg in messages:
        msg.time = abs_time - current_time
        track.append(msg)
        current_time = abs_time

    track.append(MetaMessage("end_of_track", time=0))
    return mid


def voicing_to_events(
    voicing: ChordVoicing,
    start_ticks: int = 0,
    duration_ticks: int = CHORD_BEATS * TICKS_PER_BEAT,
    velocity: int = 100,
    tuning: Tuning = Tuning.STANDARD,
) -> list[MidiEvent]:
    """
    Strum a voicing from the lowest sounded string up.

    Every note is released together at the end of the chord, so later
    strings ring slightly shorter.
    """
    events: list[MidiEvent] = []
    end_ticks = start_ticks + duration_ticks
    for position, s in enumerate(reversed(voicing.sounded_strings)):
        onset = start_ticks + position * STRUM_TICKS
        events.append(
            MidiEvent(
                pitch=tuning.midi_at(s.string_idx, s.fret),
                start_ticks=onset,
                duration_ticks=max(0, end_ticks - onset),
                velocity=velocity,
            )
        )
    return events


def voicings_to_midi(
    voicings: Sequence[ChordVoicing],
    tempo_bpm: int = 120,
    beats_per_chord: int = CHORD_BEATS,
) -> MidiFile:
    """
    Render a chord sequence, one voicing per bar.

    Args:
        voicings: Voicings in playing order
        tempo_bpm: Tempo in beats per minute
        beats_per_chord: How long each chord rings

    Returns:
        A mido MidiFile ready to be saved
    """
    chord_ticks = beats_per_chord * TICKS_PER_BEAT
    events: list[MidiEvent] = []
    for index, voicing in enumerate(voicings):
        events.extend(
            voicing_to_events(voicing, start_ticks=index * chord_ticks, duration_ticks=chord_ticks)
        )
    return events_to_midi(events, tempo_bpm=tempo_bpm)


def voicing_to_midi(voicing: ChordVoicing, tempo_bpm: int = 120) -> MidiFile:
    """A single strummed chord as a MidiFile."""
    return voicings_to_midi([voicing], tempo_bpm=tempo_bpm)
