"""
Core scale primitives - the Radix layer.

These are the mathematical invariants that everything else composes on:
- Pitch: The seven natural pitch letters (A-G)
- PitchClass: The 12 chromatic pitch classes (0-11)
- Interval: Signed distance between pitches in cents
- Accidental: Canonical and custom cents offsets
- Note: Pitch + accidental + optional octave + adjustment
- Scale: Interval sequence with optional root; classification and matching
- ScaleRange: One degree of a scale bound to a concrete note
- DegreeCache: Lazily built, thread-safe degree slots
"""

from chuk_mcp_scales.core.accidental import Accidental, with_semitone, with_symbol
from chuk_mcp_scales.core.cache import DegreeCache
from chuk_mcp_scales.core.note import Note
from chuk_mcp_scales.core.pitch import Interval, Pitch, PitchClass, round_semitones
from chuk_mcp_scales.core.scale import Scale, ScaleConstructionError, ScaleRange

__all__ = [
    # Pitch
    "Pitch",
    "PitchClass",
    "Interval",
    "round_semitones",
    # Accidental
    "Accidental",
    "with_semitone",
    "with_symbol",
    # Note
    "Note",
    # Scale
    "Scale",
    "ScaleRange",
    "ScaleConstructionError",
    "DegreeCache",
]
