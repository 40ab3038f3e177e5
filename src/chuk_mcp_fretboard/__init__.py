"""
chuk-mcp-fretboard - guitar fretboard mapping, chord voicings and
diatonic harmonization.

The three entry points:
- project_notes: every neck position of a scale or chord
- generate_voicings: ranked, fingered, playable chord shapes
- harmonize: the chord built on each scale degree
"""

from chuk_mcp_fretboard.fretboard import ordered_notes, project_notes
from chuk_mcp_fretboard.harmony import harmonize
from chuk_mcp_fretboard.models import ChordVoicing, FretboardNote, HarmonizedChord
from chuk_mcp_fretboard.voicings import assign_fingering, generate_voicings, name_voicing

__version__ = "0.1.0"

__all__ = [
    "ChordVoicing",
    "FretboardNote",
    "HarmonizedChord",
    "assign_fingering",
    "generate_voicings",
    "harmonize",
    "name_voicing",
    "ordered_notes",
    "project_notes",
]
