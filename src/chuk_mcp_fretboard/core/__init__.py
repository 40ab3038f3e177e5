"""
Core music primitives.

The invariants everything else composes on:
- PitchClass: The 12 chromatic pitch classes (0-11)
- Tuning: Open-string pitches of the six-string neck
- ChordQuality: Interval stacks defining chord types
- ScaleType: Interval patterns defining scales
"""

from chuk_mcp_fretboard.core.chord import CHORD_QUALITIES, ChordQuality, chord_symbol
from chuk_mcp_fretboard.core.pitch import NOTE_NAMES, PitchClass, interval_name, pitch_set
from chuk_mcp_fretboard.core.scale import SCALE_TYPES, ScaleType
from chuk_mcp_fretboard.core.tuning import STRING_COUNT, Tuning

__all__ = [
    # Pitch
    "NOTE_NAMES",
    "PitchClass",
    "interval_name",
    "pitch_set",
    # Tuning
    "STRING_COUNT",
    "Tuning",
    # Chord
    "CHORD_QUALITIES",
    "ChordQuality",
    "chord_symbol",
    # Scale
    "SCALE_TYPES",
    "ScaleType",
]
