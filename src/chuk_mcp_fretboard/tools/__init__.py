"""
MCP tool implementations.

Tools are organized by domain:
- fretboard - Catalog discovery and note positions
- voicings - Chord shape search and MIDI export
- harmony - Diatonic chords per scale degree
"""

from chuk_mcp_fretboard.tools.fretboard import register_fretboard_tools
from chuk_mcp_fretboard.tools.harmony import register_harmony_tools
from chuk_mcp_fretboard.tools.voicings import register_voicing_tools

__all__ = [
    "register_fretboard_tools",
    "register_harmony_tools",
    "register_voicing_tools",
]
