"""
Tuning primitive - the fixed open-string layout of a six-string guitar.

Strings are indexed 0 (highest pitched, high E) to 5 (lowest, low E).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .pitch import PitchClass

STRING_COUNT = 6


@dataclass(frozen=True)
class Tuning:
    """
    Open-string pitches, high string first.

    Immutable and hashable. The MIDI numbers give the sounding octave of
    each open string and are only needed for export.
    """

    open_pitches: tuple[PitchClass, ...]
    open_midi: tuple[int, ...]
    name: str = ""

    STANDARD: ClassVar[Tuning]

    def __post_init__(self) -> None:
        if len(self.open_pitches) != STRING_COUNT:
            raise ValueError(
                f"Tuning must have {STRING_COUNT} strings, got {len(self.open_pitches)}"
            )
        if len(self.open_midi) != STRING_COUNT:
            raise ValueError(
                f"Tuning must have {STRING_COUNT} MIDI notes, got {len(self.open_midi)}"
            )
        for pitch, midi in zip(self.open_pitches, self.open_midi):
            if PitchClass(midi % 12) != pitch:
                raise ValueError(f"MIDI note {midi} does not sound {pitch.spell()}")

    def pitch_at(self, string_idx: int, fret: int) -> PitchClass:
        """Pitch class sounded by a string stopped at a fret (0 = open)."""
        return self.open_pitches[string_idx].transpose(fret)

    def midi_at(self, string_idx: int, fret: int) -> int:
        """MIDI note number sounded by a string stopped at a fret."""
        return self.open_midi[string_idx] + fret

    def __len__(self) -> int:
        return len(self.open_pitches)

    def __str__(self) -> str:
        return self.name or " ".join(p.spell() for p in reversed(self.open_pitches))


# E B G D A E, high to low
Tuning.STANDARD = Tuning(
    open_pitches=(
        PitchClass.E,
        PitchClass.B,
        PitchClass.G,
        PitchClass.D,
        PitchClass.A,
        PitchClass.E,
    ),
    open_midi=(64, 59, 55, 50, 45, 40),
    name="standard",
)
