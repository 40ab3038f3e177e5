"""
Tests for the fretboard projector.
"""

import pytest

from chuk_mcp_fretboard.constants import MAX_FRET
from chuk_mcp_fretboard.core import NOTE_NAMES, SCALE_TYPES, PitchClass, Tuning
from chuk_mcp_fretboard.fretboard import ordered_notes, project_notes
from chuk_mcp_fretboard.models import FretboardNote

INTERVAL_SETS = [
    [0],
    [0, 4, 7],
    [0, 3, 7, 10],
    [0, 2, 4, 5, 7, 9, 11],
    [0, 3, 5, 6, 7, 10],
]


class TestProjectNotes:
    """Tests for project_notes."""

    def test_unknown_root_is_empty(self) -> None:
        """Unknown roots produce nothing rather than raising."""
        assert project_notes("Zz", [0, 4, 7]) == []
        assert project_notes("", [0]) == []

    def test_a_minor_open_strings(self) -> None:
        """A minor includes open A on string 5 and excludes open B."""
        notes = project_notes("A", [0, 3, 7])
        open_a = FretboardNote(string=5, fret=0, note="A", interval=0, is_root=True)
        assert open_a in notes
        assert not any(n.string == 2 and n.fret == 0 for n in notes)

    def test_single_pitch_count(self) -> None:
        """Every C up to fret 15 appears once (frets 8, 1, 13, 5, 10, 3, 15, 8)."""
        notes = project_notes("C", [0])
        assert len(notes) == 8
        assert {(n.string, n.fret) for n in notes} == {
            (1, 8),
            (2, 1),
            (2, 13),
            (3, 5),
            (4, 10),
            (5, 3),
            (5, 15),
            (6, 8),
        }

    @pytest.mark.parametrize("root", NOTE_NAMES)
    @pytest.mark.parametrize("intervals", INTERVAL_SETS)
    def test_interval_relation(self, root: str, intervals: list[int]) -> None:
        """Each note's interval matches its pitch and comes from the input set."""
        root_pc = PitchClass.parse(root)
        for note in project_notes(root, intervals):
            pitch = PitchClass.parse(note.note)
            assert root_pc.interval_to(pitch) == note.interval
            assert note.interval in {i % 12 for i in intervals}
            assert note.is_root == (note.interval == 0)

    @pytest.mark.parametrize("intervals", INTERVAL_SETS)
    def test_complete_and_unique(self, intervals: list[int]) -> None:
        """Every matching position appears exactly once."""
        notes = project_notes("G", intervals)
        positions = [(n.string, n.fret) for n in notes]
        assert len(positions) == len(set(positions))

        targets = {PitchClass.G.transpose(i) for i in intervals}
        expected = {
            (s + 1, f)
            for s in range(6)
            for f in range(MAX_FRET + 1)
            if Tuning.STANDARD.pitch_at(s, f) in targets
        }
        assert set(positions) == expected

    def test_order_is_string_major(self) -> None:
        """Output is ordered by string, then fret."""
        notes = project_notes("E", [0, 2, 4, 5, 7, 9, 11])
        keys = [(n.string, n.fret) for n in notes]
        assert keys == sorted(keys)
        assert notes[0].string == 1

    def test_intervals_above_octave(self) -> None:
        """Compound intervals land on the same positions as simple ones."""
        assert project_notes("C", [0, 16, 19]) == project_notes("C", [0, 4, 7])

    def test_deterministic(self) -> None:
        """Identical inputs give identical outputs."""
        assert project_notes("D", [0, 4, 7]) == project_notes("D", [0, 4, 7])

    def test_flat_root_spelled_sharp(self) -> None:
        """Flat roots are accepted; notes come back with sharps."""
        notes = project_notes("Bb", [0])
        assert notes
        assert all(n.note == "A#" for n in notes)


class TestOrderedNotes:
    """Tests for ordered_notes."""

    def test_c_major(self) -> None:
        """C major spelled in order."""
        intervals = SCALE_TYPES["Major (Ionian)"].intervals
        assert ordered_notes("C", intervals) == ["C", "D", "E", "F", "G", "A", "B"]

    def test_wraps_octave(self) -> None:
        """Notes past B wrap to C."""
        assert ordered_notes("A", [0, 3, 7]) == ["A", "C", "E"]

    def test_unknown_root(self) -> None:
        """Unknown roots give no notes."""
        assert ordered_notes("H", [0, 4, 7]) == []
