"""
Shape naming - human-readable labels for chord voicings.

Labels come from an ordered table of rules. The first rule whose
predicate matches the voicing supplies the label, so new shape families
are added by extending (or replacing) the table rather than editing
the lookup.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from chuk_mcp_fretboard.constants import PERFECT_FIFTH
from chuk_mcp_fretboard.models.fretboard import ChordVoicing, StringAssignment

# Barre-chord family by the string carrying the root in the bass
_SHAPE_FAMILIES: dict[int, str] = {
    5: "E-Shape",
    4: "A-Shape",
    3: "D-Shape",
}


@dataclass(frozen=True)
class ShapeRule:
    """
    One naming rule.

    matches receives the voicing and its bass string; label receives the
    base chord name and the same arguments and returns the display name.
    """

    name: str
    matches: Callable[[ChordVoicing, StringAssignment], bool]
    label: Callable[[str, ChordVoicing, StringAssignment], str]


def _is_common_shape(voicing: ChordVoicing, bass: StringAssignment) -> bool:
    # x-3-3-2-1-1 style: fifth in the bass on the A string, first position
    return voicing.starting_fret == 1 and bass.string_idx == 4 and bass.interval == PERFECT_FIFTH


def _is_easy_shape(voicing: ChordVoicing, bass: StringAssignment) -> bool:
    # x-x-3-2-1-1 style: root on the D string, first position
    return voicing.starting_fret == 1 and bass.string_idx == 3 and bass.is_root


def _is_open_shape(voicing: ChordVoicing, bass: StringAssignment) -> bool:
    return (
        bass.is_root
        and voicing.starting_fret <= 3
        and any(s.is_open for s in voicing.strings)
    )


SHAPE_RULES: tuple[ShapeRule, ...] = (
    ShapeRule("common", _is_common_shape, lambda base, v, b: f"{base} (Common)"),
    ShapeRule("easy", _is_easy_shape, lambda base, v, b: f"{base} (Easy)"),
    ShapeRule("open", _is_open_shape, lambda base, v, b: f"{base} (Open)"),
    ShapeRule(
        "family",
        lambda v, b: b.is_root and b.string_idx in _SHAPE_FAMILIES,
        lambda base, v, b: f"{base} ({_SHAPE_FAMILIES[b.string_idx]})",
    ),
    ShapeRule("root", lambda v, b: b.is_root, lambda base, v, b: base),
    ShapeRule("slash", lambda v, b: True, lambda base, v, b: f"{base}/{b.note}"),
)


def name_voicing(
    base_name: str,
    voicing: ChordVoicing,
    rules: Sequence[ShapeRule] = SHAPE_RULES,
) -> str:
    """
    Decorate a chord name with the voicing's shape.

    Args:
        base_name: Chord name such as 'C' or 'F#m7'
        voicing: A finished voicing
        rules: Ordered naming rules (first match wins)

    Returns:
        e.g. 'C (Open)', 'F (E-Shape)', 'C/E'; the base name when no
        string sounds or no rule matches
    """
    bass = voicing.bass_string
    if bass is None:
        return base_name

    for rule in rules:
        if rule.matches(voicing, bass):
            return rule.label(base_name, voicing, bass)
    return base_name
