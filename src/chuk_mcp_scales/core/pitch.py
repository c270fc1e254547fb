"""
Pitch primitives - Pitch, PitchClass and Interval.

These are the foundational types for all pitch-related operations.
Pitch is one of the seven natural letters (A-G).
PitchClass represents the 12 chromatic pitches (octave-independent).
Interval represents the signed distance between pitches in cents.
"""

from __future__ import annotations

import sys
from enum import Enum, IntEnum
from functools import total_ordering
from typing import ClassVar

from chuk_mcp_scales.constants import CENTS_PER_SEMITONE, ErrorMessages, IntervalMode

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]


class Pitch(Enum):
    """
    The seven natural pitch letters.

    The value is the pitch order: semitones above C within an octave.
    """

    C = 0
    D = 2
    E = 4
    F = 5
    G = 7
    A = 9
    B = 11

    @property
    def order(self) -> int:
        """Semitones above C."""
        return int(self.value)

    @classmethod
    def parse(cls, symbol: str) -> Pitch:
        """Parse a pitch letter, case-insensitive."""
        name = symbol.strip().upper()
        if name in cls.__members__:
            return cls[name]
        raise ValueError(ErrorMessages.INVALID_PITCH.format(pitch=symbol))

    def __str__(self) -> str:
        return self.name


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]


def round_semitones(cents: int | float) -> int:
    """Round cents to semitones, half away from zero, keeping the sign."""
    magnitude = int((abs(cents) + CENTS_PER_SEMITONE / 2) // CENTS_PER_SEMITONE)
    return -magnitude if cents < 0 else magnitude


@total_ordering
class Interval:
    """
    Signed distance between pitches in cents.

    Positive cents ascend, negative cents descend. Scales are interval
    sequences, so this is the unit every scale computation is built from.

    Immutable and hashable. Equality and ordering use cents only; the
    optional symbol and mode are descriptive.
    """

    __slots__ = ("_cents", "_symbol", "_mode")
    _cents: int
    _symbol: str | None
    _mode: IntervalMode | None

    # Named intervals (class constants)
    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    AUGMENTED_FOURTH: ClassVar[Interval]
    DIMINISHED_FIFTH: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]
    QUARTER_TONE: ClassVar[Interval]

    # Short aliases
    P1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    TT: ClassVar[Interval]
    P5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    P8: ClassVar[Interval]

    def __init__(
        self,
        cents: int,
        symbol: str | None = None,
        mode: IntervalMode | None = None,
    ) -> None:
        """Create an interval with the given number of cents."""
        object.__setattr__(self, "_cents", int(cents))
        object.__setattr__(self, "_symbol", symbol)
        object.__setattr__(self, "_mode", mode)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Interval is immutable")

    @classmethod
    def of_semitones(cls, semitones: int) -> Interval:
        """Create an interval from whole semitones."""
        return cls(semitones * CENTS_PER_SEMITONE)

    @property
    def cents(self) -> int:
        """Signed width in cents."""
        return self._cents

    @property
    def semitones(self) -> int:
        """Width rounded to the nearest semitone, half away from zero."""
        return round_semitones(self._cents)

    @property
    def adjustment(self) -> int:
        """Cents left over after rounding to the nearest semitone."""
        return self._cents - self.semitones * CENTS_PER_SEMITONE

    @property
    def symbol(self) -> str | None:
        return self._symbol

    @property
    def mode(self) -> IntervalMode | None:
        return self._mode

    def compare(self, other: Interval | int | None) -> int:
        """
        Signed cents difference from another interval.

        Comparing against None is incomparable and reports the largest
        possible result.
        """
        if other is None:
            return sys.maxsize
        other_cents = other._cents if isinstance(other, Interval) else int(other)
        return self._cents - other_cents

    def equals_ignore_direction(self, other: Interval | None) -> bool:
        """True if both intervals have the same width, ascending or descending."""
        if other is None:
            return False
        return abs(self._cents) == abs(other._cents)

    def reverse(self, symbol: str | None = None) -> Interval:
        """The same interval in the opposite direction."""
        return Interval(-self._cents, symbol if symbol is not None else self._symbol, self._mode)

    def __add__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._cents + other._cents)

    def __sub__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._cents - other._cents)

    def __neg__(self) -> Interval:
        return self.reverse()

    def __abs__(self) -> Interval:
        return Interval(abs(self._cents), self._symbol, self._mode)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._cents == other._cents)

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._cents < other._cents)

    def __hash__(self) -> int:
        return hash(self._cents)

    def __repr__(self) -> str:
        if self._symbol:
            return f"Interval({self._cents}, {self._symbol!r})"
        return f"Interval({self._cents})"

    def __str__(self) -> str:
        if self._symbol:
            return self._symbol
        return f"{'+' if self._cents > 0 else ''}{self._cents} cents"


# Initialize class constants after class is defined
Interval.UNISON = Interval(0, "P1", IntervalMode.PERFECT)
Interval.MINOR_SECOND = Interval(100, "m2", IntervalMode.MINOR)
Interval.MAJOR_SECOND = Interval(200, "M2", IntervalMode.MAJOR)
Interval.MINOR_THIRD = Interval(300, "m3", IntervalMode.MINOR)
Interval.MAJOR_THIRD = Interval(400, "M3", IntervalMode.MAJOR)
Interval.PERFECT_FOURTH = Interval(500, "P4", IntervalMode.PERFECT)
Interval.AUGMENTED_FOURTH = Interval(600, "A4", IntervalMode.AUGMENTED)
Interval.DIMINISHED_FIFTH = Interval(600, "d5", IntervalMode.DIMINISHED)
Interval.PERFECT_FIFTH = Interval(700, "P5", IntervalMode.PERFECT)
Interval.MINOR_SIXTH = Interval(800, "m6", IntervalMode.MINOR)
Interval.MAJOR_SIXTH = Interval(900, "M6", IntervalMode.MAJOR)
Interval.MINOR_SEVENTH = Interval(1000, "m7", IntervalMode.MINOR)
Interval.MAJOR_SEVENTH = Interval(1100, "M7", IntervalMode.MAJOR)
Interval.OCTAVE = Interval(1200, "P8", IntervalMode.PERFECT)
Interval.QUARTER_TONE = Interval(50, "q", IntervalMode.QUARTER)

# Short aliases
Interval.P1 = Interval.UNISON
Interval.m2 = Interval.MINOR_SECOND
Interval.M2 = Interval.MAJOR_SECOND
Interval.m3 = Interval.MINOR_THIRD
Interval.M3 = Interval.MAJOR_THIRD
Interval.P4 = Interval.PERFECT_FOURTH
Interval.TT = Interval.AUGMENTED_FOURTH
Interval.P5 = Interval.PERFECT_FIFTH
Interval.m6 = Interval.MINOR_SIXTH
Interval.M6 = Interval.MAJOR_SIXTH
Interval.m7 = Interval.MINOR_SEVENTH
Interval.M7 = Interval.MAJOR_SEVENTH
Interval.P8 = Interval.OCTAVE
