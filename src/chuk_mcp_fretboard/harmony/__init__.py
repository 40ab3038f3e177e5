"""
Harmony - chords built on each scale degree.
"""

from chuk_mcp_fretboard.harmony.harmonizer import (
    ALT,
    classify_triad,
    harmonize,
    roman_numeral,
)

__all__ = [
    "ALT",
    "classify_triad",
    "harmonize",
    "roman_numeral",
]
