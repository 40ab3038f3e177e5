"""
Fingering - which left-hand finger stops each fretted string.

Index finger takes the lowest fret (barring it when two or more strings
share that fret); middle, ring and pinky follow in fret order.
"""

from __future__ import annotations

from collections.abc import Sequence

from chuk_mcp_fretboard.constants import INDEX_FINGER, PINKY_FINGER
from chuk_mcp_fretboard.models.fretboard import StringAssignment


def assign_fingering(strings: Sequence[StringAssignment]) -> tuple[StringAssignment, ...]:
    """
    Annotate a shape with finger numbers.

    Open and muted strings never get a finger. If more than three
    fretted strings remain after the index finger, the extras are left
    without one.

    Args:
        strings: The six string assignments of a finished shape

    Returns:
        New assignments in the same order, with finger set on fretted strings
    """
    cleared = [s.model_copy(update={"finger": None}) for s in strings]
    fretted = [s for s in cleared if s.is_fretted]
    if not fretted:
        return tuple(cleared)

    min_fret = min(s.fret for s in fretted)
    on_min_fret = [s for s in fretted if s.fret == min_fret]

    # Barre: the index lies across every string at the lowest fret
    if len(on_min_fret) >= 2:
        indexed = {s.string_idx for s in on_min_fret}
    else:
        indexed = {on_min_fret[0].string_idx}

    remaining = sorted(
        (s for s in fretted if s.string_idx not in indexed),
        key=lambda s: (s.fret, -s.string_idx),
    )
    fingers = {idx: INDEX_FINGER for idx in indexed}
    for finger, s in enumerate(remaining, start=INDEX_FINGER + 1):
        if finger > PINKY_FINGER:
            break
        fingers[s.string_idx] = finger

    return tuple(
        s.model_copy(update={"finger": fingers[s.string_idx]}) if s.string_idx in fingers else s
        for s in cleared
    )
