#!/usr/bin/env python3
"""
Example: Exploring Scales with the Catalog.

This demonstrates building scales from catalog templates, spelling their
notes, recognising modes and relative scales, and locating notes.

Usage:
    python examples/relative_scales.py
"""

from pathlib import Path

from chuk_mcp_scales.catalog import ScaleCatalog
from chuk_mcp_scales.core import Note, Pitch, Scale


def main() -> None:
    """Demonstrate the scale system."""
    print("CHUK Scales Demo")
    print("=" * 40)
    print()

    library_path = Path(__file__).parent.parent / "src/chuk_mcp_scales/catalog/library"
    catalog = ScaleCatalog(library_path=library_path)

    # List available scales
    print("Available scales:")
    for meta in catalog.list_scales():
        print(f"  {meta.name}: {meta.size} notes ({meta.family})")
    print()

    c_major = catalog.get_scale("major", Note.parse("C4"))
    a_minor = catalog.get_scale("minor", Note.parse("A4"))
    if c_major is None or a_minor is None:
        print("Failed to load scales")
        return

    print(f"{c_major}: {' '.join(str(n) for n in c_major)}")
    print(f"{a_minor}: {' '.join(str(n) for n in a_minor)}")
    print(f"  Rotation of each other: {c_major.has_equal_interval_sequence(a_minor)}")
    print(f"  Relative scales: {c_major.has_equal_note_sequence(a_minor)}")
    print()

    # Classification
    print("Classification:")
    for name in ["chromatic", "major", "whole_tone", "major_pentatonic"]:
        scale = catalog.get_scale(name)
        print(
            f"  {name}: ascending={scale.is_ascending()} chromatic={scale.is_chromatic()} "
            f"diatonic_steps={scale.has_diatonic_steps()} cents={scale.cents}"
        )
    print()

    # Modes of major
    print("Modes of the major scale:")
    for meta, start in catalog.find_modes(c_major):
        mode = c_major.mode(start, meta.symbol)
        print(f"  degree {start}: {mode}")
    print()

    # Root changes discard cached degrees
    c_major.set_root(Note.parse("F4"))
    print(f"After set_root: {c_major}: {' '.join(str(n) for n in c_major)}")
    degree = c_major.index_of(None, Pitch.B)
    print(f"  B natural found: {degree < c_major.size()}")
    print()

    # Build a scale from notes
    notes = [Note.parse(n) for n in ["E4", "F#4", "G#4", "A#4", "C5", "D5", "E5"]]
    scale = Scale.from_notes(*notes)
    matches = [m.name for m in catalog.identify(scale)]
    print(f"E F# G# A# C D E -> {matches}")


if __name__ == "__main__":
    main()
