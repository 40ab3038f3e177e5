"""
Fretboard projection - scale and chord tones mapped onto the neck.
"""

from chuk_mcp_fretboard.fretboard.projector import ordered_notes, project_notes

__all__ = [
    "ordered_notes",
    "project_notes",
]
