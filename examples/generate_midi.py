#!/usr/bin/env python3
"""
Example: Strum a chord progression to MIDI.

Each chord of a I-vi-IV-V progression in C is voiced with its
top-ranked shape and strummed for one bar.

Usage:
    python examples/generate_midi.py
    # Creates: examples/output/progression.mid
"""

from pathlib import Path

from chuk_mcp_fretboard.compiler import voicings_to_midi
from chuk_mcp_fretboard.core import CHORD_QUALITIES
from chuk_mcp_fretboard.voicings import generate_voicings

PROGRESSION = [("C", "Major"), ("A", "Minor"), ("F", "Major"), ("G", "Major")]


def main() -> None:
    """Generate the example MIDI file."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    voicings = []
    for root, quality in PROGRESSION:
        chord = CHORD_QUALITIES[quality]
        shapes = generate_voicings(root, chord.intervals, chord.name)
        print(f"  {chord.chord_name(root):<4} -> {shapes[0].name} ({shapes[0].id})")
        voicings.append(shapes[0])

    path = output_dir / "progression.mid"
    voicings_to_midi(voicings, tempo_bpm=96).save(str(path))
    print(f"\nCreated: {path}")


if __name__ == "__main__":
    main()
