"""
Chord primitives - ChordQuality and chord symbols.

Chords are stacks of intervals measured from the root. A quality pairs a
display name (the catalog key used by callers) with a short symbol suffix
used to build chord names such as "Cm7" or "F#sus4".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .pitch import PitchClass, pitch_set


@dataclass(frozen=True)
class ChordQuality:
    """
    A chord quality defined by its intervals from the root.

    Intervals are kept in catalog order and may exceed an octave
    (a ninth is 14); they are reduced modulo 12 when mapped to pitches.

    Immutable and hashable.
    """

    name: str
    intervals: tuple[int, ...]
    symbol: str = ""

    MAJOR: ClassVar[ChordQuality]
    MINOR: ClassVar[ChordQuality]
    DIMINISHED: ClassVar[ChordQuality]
    AUGMENTED: ClassVar[ChordQuality]
    MAJOR_7: ClassVar[ChordQuality]
    MINOR_7: ClassVar[ChordQuality]
    DOMINANT_7: ClassVar[ChordQuality]
    HALF_DIMINISHED: ClassVar[ChordQuality]
    DIMINISHED_7: ClassVar[ChordQuality]

    def __post_init__(self) -> None:
        if not self.intervals:
            raise ValueError(f"Chord quality '{self.name}' has no intervals")
        if any(i < 0 for i in self.intervals):
            raise ValueError(f"Chord quality '{self.name}' has negative intervals")

    def get_pitches(self, root: PitchClass) -> frozenset[PitchClass]:
        """All pitch classes of this quality built on a root."""
        return pitch_set(root, self.intervals)

    def chord_name(self, root: PitchClass | str) -> str:
        """Chord name for a root, e.g. 'A' + 'm7' -> 'Am7'."""
        root_name = root.spell() if isinstance(root, PitchClass) else root
        return f"{root_name}{self.symbol}"

    def __str__(self) -> str:
        return self.name


_BUILTIN_QUALITIES: list[ChordQuality] = [
    ChordQuality("Major", (0, 4, 7), ""),
    ChordQuality("Minor", (0, 3, 7), "m"),
    ChordQuality("5 (Power Chord)", (0, 7), "5"),
    ChordQuality("Sus2", (0, 2, 7), "sus2"),
    ChordQuality("Sus4", (0, 5, 7), "sus4"),
    ChordQuality("Diminished", (0, 3, 6), "dim"),
    ChordQuality("Augmented", (0, 4, 8), "aug"),
    ChordQuality("Major 6", (0, 4, 7, 9), "6"),
    ChordQuality("Minor 6", (0, 3, 7, 9), "m6"),
    ChordQuality("6/9", (0, 4, 7, 9, 14), "6/9"),
    ChordQuality("Dominant 7", (0, 4, 7, 10), "7"),
    ChordQuality("Major 7", (0, 4, 7, 11), "maj7"),
    ChordQuality("Minor 7", (0, 3, 7, 10), "m7"),
    ChordQuality("Minor Major 7", (0, 3, 7, 11), "m(maj7)"),
    ChordQuality("Half-Diminished", (0, 3, 6, 10), "m7b5"),
    ChordQuality("Diminished 7", (0, 3, 6, 9), "dim7"),
    ChordQuality("7sus4", (0, 5, 7, 10), "7sus4"),
    ChordQuality("7b5 (Alt)", (0, 4, 6, 10), "7b5"),
    ChordQuality("7#5 (Alt)", (0, 4, 8, 10), "7#5"),
    ChordQuality("Major 9", (0, 4, 7, 11, 14), "maj9"),
    ChordQuality("Minor 9", (0, 3, 7, 10, 14), "m9"),
    ChordQuality("Dominant 9", (0, 4, 7, 10, 14), "9"),
    ChordQuality("Add 9", (0, 4, 7, 14), "add9"),
    ChordQuality("Minor Add 9", (0, 3, 7, 14), "m(add9)"),
    ChordQuality("7b9", (0, 4, 7, 10, 13), "7b9"),
    ChordQuality("7#9 (Hendrix)", (0, 4, 7, 10, 15), "7#9"),
    ChordQuality("Major 11", (0, 4, 7, 11, 14, 17), "maj11"),
    ChordQuality("Minor 11", (0, 3, 7, 10, 14, 17), "m11"),
    ChordQuality("Dominant 11", (0, 4, 7, 10, 14, 17), "11"),
    ChordQuality("Major 13", (0, 4, 7, 11, 14, 21), "maj13"),
    ChordQuality("Minor 13", (0, 3, 7, 10, 14, 21), "m13"),
    ChordQuality("Dominant 13", (0, 4, 7, 10, 14, 21), "13"),
]

CHORD_QUALITIES: dict[str, ChordQuality] = {q.name: q for q in _BUILTIN_QUALITIES}

ChordQuality.MAJOR = CHORD_QUALITIES["Major"]
ChordQuality.MINOR = CHORD_QUALITIES["Minor"]
ChordQuality.DIMINISHED = CHORD_QUALITIES["Diminished"]
ChordQuality.AUGMENTED = CHORD_QUALITIES["Augmented"]
ChordQuality.MAJOR_7 = CHORD_QUALITIES["Major 7"]
ChordQuality.MINOR_7 = CHORD_QUALITIES["Minor 7"]
ChordQuality.DOMINANT_7 = CHORD_QUALITIES["Dominant 7"]
ChordQuality.HALF_DIMINISHED = CHORD_QUALITIES["Half-Diminished"]
ChordQuality.DIMINISHED_7 = CHORD_QUALITIES["Diminished 7"]


def chord_symbol(root: str, quality_label: str) -> str:
    """
    Build a chord name from a root name and a quality label.

    Known labels use their symbol ('Minor 7' -> 'm7'); unknown labels
    are appended as-is so callers still get something readable.
    """
    quality = CHORD_QUALITIES.get(quality_label)
    suffix = quality.symbol if quality is not None else quality_label
    return f"{root}{suffix}"
