"""
Chord voicings - shape search, scoring, fingering and naming.
"""

from chuk_mcp_fretboard.voicings.fingering import assign_fingering
from chuk_mcp_fretboard.voicings.naming import SHAPE_RULES, ShapeRule, name_voicing
from chuk_mcp_fretboard.voicings.search import (
    Candidate,
    StringOption,
    count_gaps,
    generate_voicings,
    rank_voicings,
    score_shape,
)

__all__ = [
    "SHAPE_RULES",
    "Candidate",
    "ShapeRule",
    "StringOption",
    "assign_fingering",
    "count_gaps",
    "generate_voicings",
    "name_voicing",
    "rank_voicings",
    "score_shape",
]
