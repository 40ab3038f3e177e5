"""
Pydantic models for the fretboard system.

This module provides:
- FretboardNote: A matching position on the neck
- StringAssignment: One string's role in a chord shape
- ChordVoicing: A complete six-string chord shape
- HarmonizedChord: The chord built on a scale degree
"""

from chuk_mcp_fretboard.models.fretboard import (
    ChordVoicing,
    FretboardNote,
    HarmonizedChord,
    StringAssignment,
)

__all__ = [
    "ChordVoicing",
    "FretboardNote",
    "HarmonizedChord",
    "StringAssignment",
]
