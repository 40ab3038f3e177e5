"""
Voicing search - playable chord shapes for a root and interval set.

The neck is scanned in overlapping 5-fret windows. In each window the
search tries the root on each of the three lowest strings as the bass,
fills the strings above it greedily, and keeps the best-scoring shape.
Shapes found in several windows collapse to one by their fret
signature, and the survivors are ranked root-in-bass first, then by
position on the neck.

This is a heuristic rather than an exhaustive search: a window yields
at most one shape, and only shapes with the root in the bass are
constructed.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache

from chuk_mcp_fretboard.constants import (
    BASS_STRINGS,
    GAP_PENALTY,
    INTERVAL_WEIGHT,
    MAX_VOICINGS,
    MUTED,
    PERFECT_FIFTH,
    ROOT,
    WINDOW_SPAN,
    WINDOW_STARTS,
)
from chuk_mcp_fretboard.core.chord import chord_symbol
from chuk_mcp_fretboard.core.pitch import PitchClass, pitch_set
from chuk_mcp_fretboard.core.tuning import Tuning
from chuk_mcp_fretboard.models.fretboard import ChordVoicing, StringAssignment
from chuk_mcp_fretboard.voicings.fingering import assign_fingering
from chuk_mcp_fretboard.voicings.naming import name_voicing

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StringOption:
    """A fret choice for one string; pitch is None when muted."""

    fret: int
    pitch: PitchClass | None = None

    @property
    def is_muted(self) -> bool:
        return self.fret == MUTED


MUTE = StringOption(MUTED)


@dataclass(frozen=True)
class Candidate:
    """
    A scored shape from one bass-string attempt.

    shape is indexed by string (0 = high E).
    """

    shape: tuple[StringOption, ...]
    intervals: frozenset[int]
    score: int


def window_options(
    start: int,
    targets: frozenset[PitchClass],
    tuning: Tuning = Tuning.STANDARD,
) -> tuple[tuple[StringOption, ...], ...]:
    """
    Per-string choices inside the window [start, start + 4].

    Every string may be muted; the open string is offered whenever it
    sounds a target, whatever the window.
    """
    end = start + WINDOW_SPAN - 1
    per_string: list[tuple[StringOption, ...]] = []
    for string_idx in range(len(tuning)):
        options = [MUTE]
        if tuning.pitch_at(string_idx, 0) in targets:
            options.append(StringOption(0, tuning.pitch_at(string_idx, 0)))
        for fret in range(max(start, 1), end + 1):
            pitch = tuning.pitch_at(string_idx, fret)
            if pitch in targets:
                options.append(StringOption(fret, pitch))
        per_string.append(tuple(options))
    return tuple(per_string)


def count_gaps(shape: Sequence[StringOption]) -> int:
    """Number of places where muted strings separate two sounded ones."""
    sounded = [idx for idx, option in enumerate(shape) if not option.is_muted]
    return sum(1 for low, high in zip(sounded, sounded[1:]) if high - low > 1)


def score_shape(intervals: frozenset[int], shape: Sequence[StringOption]) -> int:
    """10 per distinct interval, minus 50 per gap."""
    return INTERVAL_WEIGHT * len(intervals) - GAP_PENALTY * count_gaps(shape)


def _pick_option(
    options: Sequence[StringOption],
    height: int,
    root: PitchClass,
    used: frozenset[int],
) -> StringOption:
    """Choose a string's note given how far above the bass it sits."""
    playable = [(o, root.interval_to(o.pitch)) for o in options if o.pitch is not None]
    if not playable:
        return MUTE

    preferred: StringOption | None = None
    if height == 1:
        # Root + fifth foundation of the E and A barre shapes
        preferred = next((o for o, i in playable if i == PERFECT_FIFTH), None)
    elif height == 2:
        preferred = next((o for o, i in playable if i == ROOT), None)
    if preferred is not None:
        return preferred

    fresh = next((o for o, i in playable if i not in used), None)
    return fresh if fresh is not None else playable[0][0]


def build_with_bass(
    bass: int,
    root: PitchClass,
    options: tuple[tuple[StringOption, ...], ...],
) -> Candidate | None:
    """
    Build one shape with the root on the given bass string.

    Returns None when the bass string cannot sound the root in this window.
    """
    root_option = next(
        (o for o in options[bass] if not o.is_muted and o.pitch == root),
        None,
    )
    if root_option is None:
        return None

    # Low strings first: everything under the bass is muted
    picks: tuple[StringOption, ...] = (MUTE,) * (len(options) - 1 - bass) + (root_option,)
    used: frozenset[int] = frozenset({ROOT})

    for string_idx in range(bass - 1, -1, -1):
        choice = _pick_option(options[string_idx], bass - string_idx, root, used)
        picks = picks + (choice,)
        if choice.pitch is not None:
            used = used | {root.interval_to(choice.pitch)}

    shape = tuple(reversed(picks))
    return Candidate(shape=shape, intervals=used, score=score_shape(used, shape))


def best_in_window(
    start: int,
    root: PitchClass,
    targets: frozenset[PitchClass],
    tuning: Tuning = Tuning.STANDARD,
) -> Candidate | None:
    """Highest-scoring bass attempt in a window; the first one wins ties."""
    options = window_options(start, targets, tuning)
    candidates = [
        candidate
        for bass in BASS_STRINGS
        if (candidate := build_with_bass(bass, root, options)) is not None
    ]
    if not candidates:
        return None
    return max(candidates, key=lambda c: c.score)


def to_voicing(candidate: Candidate, root: PitchClass, base_name: str) -> ChordVoicing:
    """Turn a candidate into a fingered, named voicing."""
    strings: list[StringAssignment] = []
    for string_idx, option in enumerate(candidate.shape):
        if option.pitch is None:
            strings.append(StringAssignment.muted(string_idx))
            continue
        interval = root.interval_to(option.pitch)
        strings.append(
            StringAssignment(
                string_idx=string_idx,
                fret=option.fret,
                note=option.pitch.spell(),
                interval=interval,
                is_root=interval == ROOT,
            )
        )

    fretted = [s.fret for s in strings if s.is_fretted]
    voicing = ChordVoicing(
        id=ChordVoicing.shape_id([s.fret for s in strings]),
        name=base_name,
        starting_fret=min(fretted) if fretted else 1,
        strings=assign_fingering(strings),
    )
    return voicing.model_copy(update={"name": name_voicing(base_name, voicing)})


def rank_voicings(voicings: Sequence[ChordVoicing]) -> list[ChordVoicing]:
    """Root in the bass first, then lowest position; stable otherwise."""
    ranked = sorted(voicings, key=lambda v: (not v.is_root_position, v.starting_fret))
    return ranked[:MAX_VOICINGS]


@lru_cache(maxsize=512)
def _search(
    root: PitchClass,
    intervals: tuple[int, ...],
    base_name: str,
    tuning: Tuning,
) -> tuple[ChordVoicing, ...]:
    targets = pitch_set(root, intervals)
    found: dict[str, ChordVoicing] = {}

    for start in WINDOW_STARTS:
        candidate = best_in_window(start, root, targets, tuning)
        if candidate is None:
            continue
        voicing = to_voicing(candidate, root, base_name)
        if voicing.id not in found:
            found[voicing.id] = voicing
            logger.debug(
                "window %d: %s score=%d (%s)", start, voicing.id, candidate.score, voicing.name
            )

    ranked = rank_voicings(list(found.values()))
    logger.debug("%s: %d shapes found, returning %d", base_name, len(found), len(ranked))
    return tuple(ranked)


def generate_voicings(
    root: str,
    intervals: Sequence[int],
    quality_label: str = "Major",
    symbol: str | None = None,
    tuning: Tuning = Tuning.STANDARD,
) -> list[ChordVoicing]:
    """
    Search the neck for playable shapes of a chord.

    Args:
        root: Root note name ('C', 'F#', ...)
        intervals: Semitone offsets from the root
        quality_label: Chord quality name used for display ('Minor 7')
        symbol: Chord symbol suffix overriding the built-in lookup ('m7')
        tuning: Open-string layout (standard tuning)

    Returns:
        Up to 12 voicings, best first. Empty if the root is not a
        recognized note name or nothing is playable.

    Example:
        generate_voicings("C", [0, 4, 7], "Major")[0].name  # 'C (Open)'
    """
    root_pc = PitchClass.lookup(root)
    if root_pc is None:
        return []

    if symbol is not None:
        base_name = f"{root_pc.spell()}{symbol}"
    else:
        base_name = chord_symbol(root_pc.spell(), quality_label)

    return list(_search(root_pc, tuple(intervals), base_name, tuning))
