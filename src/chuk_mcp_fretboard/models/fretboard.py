"""
Fretboard models - the plain data handed back to callers.

Every model here is frozen: results are computed fresh per query and
never mutated afterwards.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_fretboard.constants import MAX_FRET, MUTED
from chuk_mcp_fretboard.core.tuning import STRING_COUNT


class FretboardNote(BaseModel):
    """A single matching position on the neck."""

    string: int = Field(..., ge=1, le=STRING_COUNT, description="1 = high E, 6 = low E")
    fret: int = Field(..., ge=0, le=MAX_FRET, description="0 = open string")
    note: str = Field(..., description="Pitch class name, sharp spelling")
    interval: int = Field(..., ge=0, le=11, description="Semitones above the root")
    is_root: bool = Field(False, description="True when interval is 0")

    model_config = {"frozen": True}


class StringAssignment(BaseModel):
    """
    What one string does in a chord shape.

    Muted strings carry fret -1, an empty note and interval -1.
    """

    string_idx: int = Field(..., ge=0, lt=STRING_COUNT, description="0 = high E, 5 = low E")
    fret: int = Field(..., ge=MUTED, description="-1 muted, 0 open, >0 fretted")
    note: str = Field("", description="Pitch class name, empty when muted")
    interval: int = Field(MUTED, ge=MUTED, le=11, description="Semitones above the root")
    is_root: bool = False
    finger: int | None = Field(None, ge=1, le=4, description="1 = index ... 4 = pinky")

    model_config = {"frozen": True}

    @property
    def is_muted(self) -> bool:
        return self.fret == MUTED

    @property
    def is_open(self) -> bool:
        return self.fret == 0

    @property
    def is_fretted(self) -> bool:
        return self.fret > 0

    @classmethod
    def muted(cls, string_idx: int) -> StringAssignment:
        """A muted string."""
        return cls(string_idx=string_idx, fret=MUTED)


class ChordVoicing(BaseModel):
    """
    A playable chord shape: one assignment per string.

    The id is the fret of each string from high E to low E joined by '-'
    (e.g. '0-1-0-2-3--1' for open C), so the same shape always gets the
    same id no matter which search window found it.
    """

    id: str = Field(..., description="Stable fret signature")
    name: str = Field(..., description="Display label, e.g. 'C (Open)'")
    starting_fret: int = Field(..., ge=1, description="Lowest fretted fret, 1 if none")
    strings: tuple[StringAssignment, ...] = Field(..., description="Ordered by string_idx")

    model_config = {"frozen": True}

    @field_validator("strings")
    @classmethod
    def validate_strings(cls, v: tuple[StringAssignment, ...]) -> tuple[StringAssignment, ...]:
        """Exactly one entry per physical string, in string order."""
        if len(v) != STRING_COUNT:
            raise ValueError(f"Voicing must have {STRING_COUNT} strings, got {len(v)}")
        if [s.string_idx for s in v] != list(range(STRING_COUNT)):
            raise ValueError("Voicing strings must be ordered by string_idx")
        return v

    @property
    def sounded_strings(self) -> list[StringAssignment]:
        """Strings that are not muted, high string first."""
        return [s for s in self.strings if not s.is_muted]

    @property
    def bass_string(self) -> StringAssignment | None:
        """Lowest-pitched sounded string."""
        sounded = self.sounded_strings
        return sounded[-1] if sounded else None

    @property
    def is_root_position(self) -> bool:
        """True when the bass note is the chord root."""
        bass = self.bass_string
        return bass is not None and bass.is_root

    @property
    def frets(self) -> tuple[int, ...]:
        return tuple(s.fret for s in self.strings)

    @staticmethod
    def shape_id(frets: tuple[int, ...] | list[int]) -> str:
        """Fret signature for a shape, high E first."""
        return "-".join(str(f) for f in frets)


class HarmonizedChord(BaseModel):
    """The chord built on one scale degree."""

    degree: str = Field(..., description="Roman numeral, e.g. 'ii' or 'vii°'")
    root: str = Field(..., description="Root note name")
    quality: str = Field(..., description="Chord quality name, e.g. 'Minor 7'")
    interval_structure: str = Field("", description="Stacked tones, e.g. 'R-b3-5-b7'")

    model_config = {"frozen": True}
