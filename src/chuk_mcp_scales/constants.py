"""
Constants and enums for the scale system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class IntervalMode(str, Enum):
    """Quality of a standard interval."""

    PERFECT = "perfect"
    MAJOR = "major"
    MINOR = "minor"
    AUGMENTED = "augmented"
    DIMINISHED = "diminished"
    QUARTER = "quarter"


class AccidentalSymbol:
    """Textual accidental symbols."""

    DOUBLE_FLAT = "bb"
    DOUBLE_SHARP = "##"
    FLAT = "b"
    NATURAL = ""
    NATURAL_FLAT = " b"
    NATURAL_SHARP = " #"
    SHARP = "#"


# Cents per semitone and per octave
CENTS_PER_SEMITONE = 100
CENTS_PER_OCTAVE = 1200
SEMITONES_PER_OCTAVE = 12

# Reference tuning (A4 = MIDI 69)
A4_NUMBER = 69
A4_FREQUENCY = 440.0

# Octave used to materialize notes of a rootless-octave scale
DEFAULT_OCTAVE = 4

# Schema versions - frozen for v1
SchemaVersion = Literal["scale/v1"]

# Scale families used to group catalog entries
ScaleFamily = Literal["chromatic", "diatonic", "pentatonic", "hexatonic", "other"]


class ErrorMessages:
    """Standardized error messages."""

    SCALE_NOT_FOUND = "Scale '{name}' not found."
    NO_INTERVALS = "A scale needs at least one interval."
    NONE_INTERVAL = "Scale interval at index {index} is None."
    INVALID_NOTE = "Invalid note: '{note}'. Expected format like 'C4', 'F#', or 'Bb3'."
    INVALID_PITCH = "Unknown pitch: '{pitch}'."
    ROOT_REQUIRED = "Scale '{name}' needs a root note for this operation."



class SuccessMessages:
    """Standardized success messages."""

    SCALE_COPIED = "Copied scale '{name}' to {path}."
