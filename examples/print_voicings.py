#!/usr/bin/env python3
"""
Example: Chord voicings and diatonic harmony.

This demonstrates the three core operations:
- Mapping a scale onto the neck
- Searching playable shapes for a chord
- Harmonizing a scale into seventh chords

Usage:
    python examples/print_voicings.py
"""

from chuk_mcp_fretboard import generate_voicings, harmonize, ordered_notes, project_notes
from chuk_mcp_fretboard.core import CHORD_QUALITIES, SCALE_TYPES


def main() -> None:
    """Print a few fretboard views."""
    print("CHUK Fretboard Demo")
    print("=" * 40)
    print()

    # A minor pentatonic, first five frets
    pentatonic = SCALE_TYPES["Minor Pentatonic"].intervals
    print("A Minor Pentatonic (frets 0-5):")
    for string in range(1, 7):
        frets = [n.fret for n in project_notes("A", pentatonic) if n.string == string and n.fret <= 5]
        print(f"  string {string}: {frets}")
    print()

    # Shapes for a few chords
    for root, quality in [("C", "Major"), ("F", "Major"), ("A", "Minor 7")]:
        chord = CHORD_QUALITIES[quality]
        print(f"{chord.chord_name(root)} voicings:")
        for voicing in generate_voicings(root, chord.intervals, chord.name)[:4]:
            fingers = "".join(str(s.finger or "-") for s in voicing.strings)
            print(f"  {voicing.id:<20} {voicing.name:<16} fingers {fingers}")
        print()

    # Diatonic sevenths in G major
    notes = ordered_notes("G", SCALE_TYPES["Major (Ionian)"].intervals)
    print(f"G major sevenths ({' '.join(notes)}):")
    for chord in harmonize(notes, "7th"):
        print(f"  {chord.degree:<5} {chord.root:<3} {chord.quality:<16} {chord.interval_structure}")


if __name__ == "__main__":
    main()
