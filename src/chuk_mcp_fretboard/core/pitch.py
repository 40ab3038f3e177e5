"""
Pitch primitives - PitchClass and interval naming.

PitchClass represents the 12 chromatic pitches (octave-independent).
Intervals are plain semitone offsets from a root; anything above an
octave is reduced modulo 12 wherever a pitch class is needed.
"""

from __future__ import annotations

from enum import IntEnum

SEMITONES_PER_OCTAVE = 12

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]

# Short interval labels, as shown on fretboard dots
_INTERVAL_NAMES: dict[int, str] = {
    0: "R",
    1: "b2",
    2: "2",
    3: "b3",
    4: "3",
    5: "4",
    6: "b5",
    7: "5",
    8: "b6",
    9: "6",
    10: "b7",
    11: "7",
}

NOTE_NAMES: tuple[str, ...] = tuple(_SHARP_NAMES)


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - the open low E and the 12th fret E are both PitchClass.E.
    Enharmonic equivalents share the same value (C# == Db == 1).

    Sharp spelling is canonical for every name this package emits.
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % SEMITONES_PER_OCTAVE)

    def interval_to(self, other: PitchClass) -> int:
        """Ascending semitone distance from this pitch class to another (0-11)."""
        return (other.value - self.value) % SEMITONES_PER_OCTAVE

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db'."""
        name = name.strip()

        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))

        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))

        # Enum names (C, Cs, D, Ds, etc.)
        name_upper = name.upper()
        for member in cls:
            if member.name.upper() == name_upper:
                return member

        raise ValueError(f"Unknown pitch class: {name}")

    @classmethod
    def lookup(cls, name: object) -> PitchClass | None:
        """
        Like parse(), but returns None for anything unrecognized.

        The projector and voicing engine treat an unknown root as
        "nothing to show" rather than an error.
        """
        if not isinstance(name, str):
            return None
        try:
            return cls.parse(name)
        except ValueError:
            return None


def pitch_set(root: PitchClass, intervals: list[int] | tuple[int, ...]) -> frozenset[PitchClass]:
    """The pitch classes sounded by a root plus intervals, reduced modulo 12."""
    return frozenset(root.transpose(interval) for interval in intervals)


def interval_name(semitones: int) -> str:
    """Short label for an interval from the root: R, b3, 5, b7..."""
    return _INTERVAL_NAMES.get(semitones, "?")
