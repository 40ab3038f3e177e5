"""
Scale primitives - ScaleType.

Scales are interval patterns from a root, stored cumulatively
(0, 2, 4, 5, ...) in ascending order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .pitch import PitchClass


@dataclass(frozen=True)
class ScaleType:
    """
    A scale defined by its intervals from the root.

    Pentatonic and blues scales are fine - nothing here assumes seven notes.

    Immutable and hashable.
    """

    name: str
    intervals: tuple[int, ...]

    MAJOR: ClassVar[ScaleType]
    NATURAL_MINOR: ClassVar[ScaleType]
    HARMONIC_MINOR: ClassVar[ScaleType]
    MELODIC_MINOR: ClassVar[ScaleType]

    def __post_init__(self) -> None:
        if not self.intervals:
            raise ValueError(f"Scale '{self.name}' has no intervals")
        if any(i < 0 for i in self.intervals):
            raise ValueError(f"Scale '{self.name}' has negative intervals")

    def get_pitches(self, root: PitchClass) -> list[PitchClass]:
        """Pitch classes of this scale from the root, in interval order."""
        return [root.transpose(interval) for interval in self.intervals]

    def __str__(self) -> str:
        return self.name


_BUILTIN_SCALES: list[ScaleType] = [
    ScaleType("Major (Ionian)", (0, 2, 4, 5, 7, 9, 11)),
    ScaleType("Minor (Aeolian)", (0, 2, 3, 5, 7, 8, 10)),
    ScaleType("Harmonic Minor", (0, 2, 3, 5, 7, 8, 11)),
    ScaleType("Melodic Minor", (0, 2, 3, 5, 7, 9, 11)),
    ScaleType("Minor Pentatonic", (0, 3, 5, 7, 10)),
    ScaleType("Major Pentatonic", (0, 2, 4, 7, 9)),
    ScaleType("Blues", (0, 3, 5, 6, 7, 10)),
    ScaleType("Dorian", (0, 2, 3, 5, 7, 9, 10)),
    ScaleType("Mixolydian", (0, 2, 4, 5, 7, 9, 10)),
    ScaleType("Phrygian", (0, 1, 3, 5, 7, 8, 10)),
    ScaleType("Lydian", (0, 2, 4, 6, 7, 9, 11)),
    ScaleType("Locrian", (0, 1, 3, 5, 6, 8, 10)),
]

SCALE_TYPES: dict[str, ScaleType] = {s.name: s for s in _BUILTIN_SCALES}

ScaleType.MAJOR = SCALE_TYPES["Major (Ionian)"]
ScaleType.NATURAL_MINOR = SCALE_TYPES["Minor (Aeolian)"]
ScaleType.HARMONIC_MINOR = SCALE_TYPES["Harmonic Minor"]
ScaleType.MELODIC_MINOR = SCALE_TYPES["Melodic Minor"]
