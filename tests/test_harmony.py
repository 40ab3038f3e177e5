"""
Tests for diatonic harmonization.
"""

import pytest

from chuk_mcp_fretboard.core import SCALE_TYPES
from chuk_mcp_fretboard.fretboard import ordered_notes
from chuk_mcp_fretboard.harmony import ALT, classify_triad, harmonize, roman_numeral

C_MAJOR = ["C", "D", "E", "F", "G", "A", "B"]


class TestClassifyTriad:
    """Tests for triad classification."""

    def test_known_triads(self) -> None:
        """The four stacked-third triads."""
        assert classify_triad(4, 7) == "Major"
        assert classify_triad(3, 7) == "Minor"
        assert classify_triad(3, 6) == "Diminished"
        assert classify_triad(4, 8) == "Augmented"

    def test_other_stacks_are_alt(self) -> None:
        """Anything else is Alt."""
        assert classify_triad(2, 7) == ALT
        assert classify_triad(None, 7) == ALT


class TestRomanNumeral:
    """Tests for degree labels."""

    def test_case_follows_triad(self) -> None:
        assert roman_numeral(0, "Major", "Major") == "I"
        assert roman_numeral(1, "Minor", "Minor") == "ii"

    def test_decorations(self) -> None:
        """Diminished, augmented and half-diminished marks."""
        assert roman_numeral(6, "Diminished", "Diminished") == "vii°"
        assert roman_numeral(6, "Diminished", "Half-Diminished") == "viiø"
        assert roman_numeral(2, "Augmented", "Augmented") == "III+"

    def test_beyond_seventh(self) -> None:
        """Degrees past VII use their number."""
        assert roman_numeral(7, "Major", "Major") == "8"
        assert roman_numeral(8, "Minor", "Minor") == "9"


class TestHarmonize:
    """Tests for harmonize."""

    def test_c_major_triads(self) -> None:
        """The classic major-key pattern."""
        chords = harmonize(C_MAJOR)
        assert [c.degree for c in chords] == ["I", "ii", "iii", "IV", "V", "vi", "vii°"]
        assert [c.quality for c in chords] == [
            "Major",
            "Minor",
            "Minor",
            "Major",
            "Major",
            "Minor",
            "Diminished",
        ]
        assert chords[0].interval_structure == "R-3-5"
        assert chords[6].interval_structure == "R-b3-b5"
        assert [c.root for c in chords] == C_MAJOR

    def test_c_major_sevenths(self) -> None:
        """Seventh chords on each degree."""
        chords = harmonize(C_MAJOR, "7th")
        assert [c.quality for c in chords] == [
            "Major 7",
            "Minor 7",
            "Minor 7",
            "Major 7",
            "Dominant 7",
            "Minor 7",
            "Half-Diminished",
        ]
        assert chords[6].degree == "viiø"
        assert chords[4].interval_structure == "R-3-5-b7"

    def test_c_major_ninths(self) -> None:
        """Ninths where the tables allow; iii keeps its seventh."""
        chords = harmonize(C_MAJOR, "9th")
        assert chords[0].quality == "Major 9"
        assert chords[5].quality == "Minor 9"
        assert chords[4].quality == "Dominant 9"
        assert chords[2].quality == "Minor 7"
        assert chords[0].interval_structure == "R-3-5-7-9"

    def test_c_major_thirteenths(self) -> None:
        """Full thirteenth stacks."""
        chords = harmonize(C_MAJOR, "13th")
        assert chords[0].quality == "Major 13"
        assert chords[0].interval_structure == "R-3-5-7-9-11-13"
        assert chords[1].quality == "Minor 13"
        assert chords[4].quality == "Dominant 13"

    def test_harmonic_minor_sevenths(self) -> None:
        """Harmonic minor gives mMaj7, an augmented III and a fully diminished vii."""
        notes = ordered_notes("A", SCALE_TYPES["Harmonic Minor"].intervals)
        chords = harmonize(notes, "7th")
        assert chords[0].quality == "Minor Major 7"
        assert chords[0].degree == "i"
        assert chords[2].degree == "III+"
        assert chords[4].quality == "Dominant 7"
        assert chords[6].quality == "Diminished 7"
        assert chords[6].degree == "vii°"

    def test_pentatonic_is_alt(self) -> None:
        """Thirds from a five-note scale do not form a triad on the tonic."""
        notes = ordered_notes("C", SCALE_TYPES["Major Pentatonic"].intervals)
        chords = harmonize(notes)
        assert len(chords) == 5
        assert chords[0].quality == ALT

    def test_empty(self) -> None:
        assert harmonize([]) == []

    def test_unknown_level_acts_as_triad(self) -> None:
        """Levels outside the list fall back to triads."""
        assert harmonize(C_MAJOR, "15th") == harmonize(C_MAJOR, "triad")

    def test_unknown_note_does_not_raise(self) -> None:
        """Unparseable notes make their stacks Alt."""
        chords = harmonize(["C", "D", "X", "F", "G", "A", "B"])
        assert len(chords) == 7
        assert chords[0].quality == ALT
        assert chords[2].quality == ALT
        assert "?" in chords[2].interval_structure

    def test_long_input_numbers_degrees(self) -> None:
        """Chromatic input labels degrees past VII by number."""
        chords = harmonize(["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"])
        assert len(chords) == 12
        assert chords[7].degree == "8"

    @pytest.mark.parametrize("level", ["triad", "7th", "9th", "11th", "13th"])
    def test_structure_length_by_level(self, level: str) -> None:
        """Each level adds one tone to the structure."""
        depth = ["triad", "7th", "9th", "11th", "13th"].index(level)
        for chord in harmonize(C_MAJOR, level):
            assert len(chord.interval_structure.split("-")) == 3 + depth
