"""
Fretboard projector - where a scale or chord lives on the neck.

Given a root and an interval set, lists every (string, fret) position
up to MAX_FRET whose pitch class belongs to the set.
"""

from __future__ import annotations

from collections.abc import Sequence

from chuk_mcp_fretboard.constants import MAX_FRET
from chuk_mcp_fretboard.core.pitch import PitchClass, pitch_set
from chuk_mcp_fretboard.core.tuning import Tuning
from chuk_mcp_fretboard.models.fretboard import FretboardNote


def project_notes(
    root: str,
    intervals: Sequence[int],
    tuning: Tuning = Tuning.STANDARD,
) -> list[FretboardNote]:
    """
    Find every position on the neck that sounds one of the target notes.

    Args:
        root: Root note name ('C', 'F#', ...)
        intervals: Semitone offsets from the root (reduced modulo 12)
        tuning: Open-string layout (standard tuning)

    Returns:
        Notes ordered string by string (high E first), frets ascending.
        Empty if the root is not a recognized note name.
    """
    root_pc = PitchClass.lookup(root)
    if root_pc is None:
        return []

    targets = pitch_set(root_pc, intervals)
    notes: list[FretboardNote] = []

    for string_idx in range(len(tuning)):
        for fret in range(MAX_FRET + 1):
            pitch = tuning.pitch_at(string_idx, fret)
            if pitch not in targets:
                continue
            interval = root_pc.interval_to(pitch)
            notes.append(
                FretboardNote(
                    string=string_idx + 1,
                    fret=fret,
                    note=pitch.spell(),
                    interval=interval,
                    is_root=interval == 0,
                )
            )

    return notes


def ordered_notes(root: str, intervals: Sequence[int]) -> list[str]:
    """
    Note names of a scale or chord in interval order.

    This is the input the harmonizer expects: ['C', 'D', 'E', ...] for
    C major. Empty if the root is not recognized.
    """
    root_pc = PitchClass.lookup(root)
    if root_pc is None:
        return []
    return [root_pc.transpose(interval).spell() for interval in intervals]
