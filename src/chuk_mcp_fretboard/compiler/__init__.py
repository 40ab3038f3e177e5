"""
Compiler - voicings to MIDI.
"""

from chuk_mcp_fretboard.compiler.midi import (
    STRUM_TICKS,
    TICKS_PER_BEAT,
    MidiEvent,
    events_to_midi,
    voicing_to_events,
    voicing_to_midi,
    voicings_to_midi,
)

__all__ = [
    "STRUM_TICKS",
    "TICKS_PER_BEAT",
    "MidiEvent",
    "events_to_midi",
    "voicing_to_events",
    "voicing_to_midi",
    "voicings_to_midi",
]
