"""
Diatonic harmonization - the chord built on each degree of a scale.

Chords are stacked in thirds from the scale's own notes (every other
note), then named by matching semitone distances against fixed tables.
The tables are a closed catalog: a stack that falls outside them keeps
the last label that did match.
"""

from __future__ import annotations

from collections.abc import Sequence

from chuk_mcp_fretboard.constants import HARMONY_LEVELS, HarmonyLevel
from chuk_mcp_fretboard.core.pitch import PitchClass, interval_name
from chuk_mcp_fretboard.models.fretboard import HarmonizedChord

ALT = "Alt"

_NUMERALS = ("I", "II", "III", "IV", "V", "VI", "VII")

# (third, fifth) -> triad quality
_TRIADS: dict[tuple[int | None, int | None], str] = {
    (4, 7): "Major",
    (3, 7): "Minor",
    (3, 6): "Diminished",
    (4, 8): "Augmented",
}

# (quality so far, distance of the new tone) -> extended quality
_SEVENTHS: dict[tuple[str, int | None], str] = {
    ("Major", 11): "Major 7",
    ("Major", 10): "Dominant 7",
    ("Minor", 10): "Minor 7",
    ("Minor", 11): "Minor Major 7",
    ("Diminished", 10): "Half-Diminished",
    ("Diminished", 9): "Diminished 7",
    ("Augmented", 10): "7#5 (Alt)",
}

_NINTHS: dict[tuple[str, int | None], str] = {
    ("Major 7", 2): "Major 9",
    ("Minor 7", 2): "Minor 9",
    ("Dominant 7", 1): "7b9",
    ("Dominant 7", 2): "Dominant 9",
    ("Dominant 7", 3): "7#9 (Hendrix)",
}

_ELEVENTHS: dict[tuple[str, int | None], str] = {
    ("Major 9", 5): "Major 11",
    ("Minor 9", 5): "Minor 11",
    ("Dominant 9", 5): "Dominant 11",
}

_THIRTEENTHS: dict[tuple[str, int | None], str] = {
    ("Major 9", 9): "Major 13",
    ("Major 11", 9): "Major 13",
    ("Minor 9", 9): "Minor 13",
    ("Minor 11", 9): "Minor 13",
    ("Dominant 9", 9): "Dominant 13",
    ("Dominant 11", 9): "Dominant 13",
}

# One table per level above the triad, applied in order
_EXTENSION_TABLES = (_SEVENTHS, _NINTHS, _ELEVENTHS, _THIRTEENTHS)

# Scale steps above the degree: third, fifth, then 7th/9th/11th/13th
_THIRD_STEP = 2
_FIFTH_STEP = 4
_EXTENSION_STEPS = (6, 8, 10, 12)

# Extension tones read better as compound intervals
_COMPOUND_NAMES: dict[int, str] = {1: "b9", 2: "9", 3: "#9", 5: "11", 6: "#11", 8: "b13", 9: "13"}


def _distance(root: PitchClass | None, other: PitchClass | None) -> int | None:
    if root is None or other is None:
        return None
    return root.interval_to(other)


def _label(distance: int | None, compound: bool = False) -> str:
    if distance is None:
        return "?"
    if compound and distance in _COMPOUND_NAMES:
        return _COMPOUND_NAMES[distance]
    return interval_name(distance)


def classify_triad(third: int | None, fifth: int | None) -> str:
    """Triad quality from the third and fifth distances, or 'Alt'."""
    return _TRIADS.get((third, fifth), ALT)


def roman_numeral(index: int, triad: str, quality: str) -> str:
    """
    Degree label: case from the triad, decorated for dim/aug/half-dim.

    Degrees past the seventh fall back to their number.
    """
    numeral = _NUMERALS[index] if index < len(_NUMERALS) else str(index + 1)
    if triad in ("Minor", "Diminished"):
        numeral = numeral.lower()

    if quality == "Half-Diminished":
        return f"{numeral}ø"
    if triad == "Diminished":
        return f"{numeral}°"
    if triad == "Augmented":
        return f"{numeral}+"
    return numeral


def harmonize(
    notes: Sequence[str],
    level: HarmonyLevel | str = "triad",
) -> list[HarmonizedChord]:
    """
    Build the chord on every degree of a scale.

    Args:
        notes: Scale note names in order, e.g. ['C', 'D', 'E', 'F', 'G', 'A', 'B']
        level: 'triad', '7th', '9th', '11th' or '13th' (unknown levels act as 'triad')

    Returns:
        One chord per input note, in the same order

    Example:
        harmonize(["C", "D", "E", "F", "G", "A", "B"])[6].degree  # 'vii°'
    """
    count = len(notes)
    if count == 0:
        return []

    depth = HARMONY_LEVELS.index(level) if level in HARMONY_LEVELS else 0
    pitches = [PitchClass.lookup(n) for n in notes]
    chords: list[HarmonizedChord] = []

    for i, root_name in enumerate(notes):
        root = pitches[i]
        third = _distance(root, pitches[(i + _THIRD_STEP) % count])
        fifth = _distance(root, pitches[(i + _FIFTH_STEP) % count])
        triad = classify_triad(third, fifth)

        quality = triad
        structure = ["R", _label(third), _label(fifth)]
        for table, step in zip(_EXTENSION_TABLES[:depth], _EXTENSION_STEPS):
            distance = _distance(root, pitches[(i + step) % count])
            quality = table.get((quality, distance), quality)
            structure.append(_label(distance, compound=step > 6))

        chords.append(
            HarmonizedChord(
                degree=roman_numeral(i, triad, quality),
                root=root_name,
                quality=quality,
                interval_structure="-".join(structure),
            )
        )

    return chords
