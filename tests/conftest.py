"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_fretboard.core import PitchClass, Tuning
from chuk_mcp_fretboard.models import ChordVoicing, StringAssignment


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_midi_path(temp_dir: Path) -> Path:
    """Path for a temporary MIDI file."""
    return temp_dir / "test.mid"


def make_strings(frets: list[int], root: str = "C") -> list[StringAssignment]:
    """String assignments for frets given high E first (-1 = muted)."""
    root_pc = PitchClass.parse(root)
    strings = []
    for idx, fret in enumerate(frets):
        if fret < 0:
            strings.append(StringAssignment.muted(idx))
            continue
        pitch = Tuning.STANDARD.pitch_at(idx, fret)
        interval = root_pc.interval_to(pitch)
        strings.append(
            StringAssignment(
                string_idx=idx,
                fret=fret,
                note=pitch.spell(),
                interval=interval,
                is_root=interval == 0,
            )
        )
    return strings


def make_voicing(frets: list[int], root: str = "C", name: str = "") -> ChordVoicing:
    """A voicing for frets given high E first, named with the root by default."""
    fretted = [f for f in frets if f > 0]
    return ChordVoicing(
        id=ChordVoicing.shape_id(frets),
        name=name or root,
        starting_fret=min(fretted) if fretted else 1,
        strings=tuple(make_strings(frets, root)),
    )
