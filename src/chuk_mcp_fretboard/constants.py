"""
Constants for the fretboard system.

No magic numbers - the search limits and level names live here.
"""

from typing import Literal

# Highest fret shown by the projector
MAX_FRET = 15

# Muted string marker (an "x" in chord diagrams)
MUTED = -1

# Voicing search: 5-fret windows starting at frets 0..12
WINDOW_SPAN = 5
WINDOW_STARTS: tuple[int, ...] = tuple(range(13))

# Bass string attempts, lowest string first (low E, A, D)
BASS_STRINGS: tuple[int, ...] = (5, 4, 3)

# Most voicings returned per chord
MAX_VOICINGS = 12

# Candidate scoring
INTERVAL_WEIGHT = 10
GAP_PENALTY = 50

# Interval offsets the string filler looks for
PERFECT_FIFTH = 7
ROOT = 0

# Left-hand fingers: 1 = index ... 4 = pinky
INDEX_FINGER = 1
PINKY_FINGER = 4

# Harmonization depth
HarmonyLevel = Literal["triad", "7th", "9th", "11th", "13th"]
HARMONY_LEVELS: tuple[str, ...] = ("triad", "7th", "9th", "11th", "13th")


class ErrorMessages:
    """Standardized error messages."""

    UNKNOWN_ROOT = "Unknown root note: '{root}'."
    SCALE_NOT_FOUND = "Scale '{name}' not found."
    CHORD_NOT_FOUND = "Chord '{name}' not found."
    INVALID_LEVEL = "Invalid harmony level: '{level}'. Expected one of: {levels}."
    NO_VOICINGS = "No playable voicings for {chord}."
    VOICING_NOT_FOUND = "Voicing '{voicing_id}' not found for {chord}."
