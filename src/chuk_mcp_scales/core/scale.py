"""
Scale primitives - Scale and ScaleRange.

A scale is an ordered sequence of intervals, optionally anchored to a root
note. Without a root it is a template: a pattern that can be classified and
compared but cannot produce concrete notes. With a root, each degree
resolves to a ScaleRange bound to a concrete note.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Union

from chuk_mcp_scales.constants import CENTS_PER_OCTAVE, CENTS_PER_SEMITONE, DEFAULT_OCTAVE, ErrorMessages
from chuk_mcp_scales.core.accidental import Accidental, with_semitone
from chuk_mcp_scales.core.cache import DegreeCache
from chuk_mcp_scales.core.note import Note
from chuk_mcp_scales.core.pitch import Interval, Pitch, round_semitones

IntervalLike = Union[Interval, int]

# Natural letters in staff order, for diatonic spelling
_LETTERS: list[Pitch] = [Pitch.C, Pitch.D, Pitch.E, Pitch.F, Pitch.G, Pitch.A, Pitch.B]


class ScaleConstructionError(ValueError):
    """Raised when a scale is built from missing or empty interval data."""


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def _span(values: Iterable[int]) -> int:
    """Distance between the lowest and highest running total, starting at 0."""
    total = low = high = 0
    for value in values:
        total += value
        if total < low:
            low = total
        elif total > high:
            high = total
    return high - low


class ScaleRange:
    """
    One degree of a scale, bound to the concrete note it resolved to.

    A range keeps a reference to its owning scale and its degree index.
    Its fundamental is fixed when the range is built; changing the scale
    root discards the range and a new one is built on next access.
    """

    __slots__ = ("_scale", "_degree", "_fundamental")

    def __init__(self, scale: Scale, degree: int, fundamental: Note | None):
        self._scale = scale
        self._degree = degree
        self._fundamental = fundamental

    @property
    def scale(self) -> Scale:
        return self._scale

    @property
    def degree(self) -> int:
        return self._degree

    def get_fundamental(self) -> Note | None:
        """The note at this degree, or None for a template scale."""
        return self._fundamental

    def is_local(self) -> bool:
        """A degree range always refers to a single note."""
        return True

    def contains(
        self,
        octave: int | None,
        pitch: Pitch,
        accidental: Accidental | None = None,
        adjustment: float | None = None,
    ) -> bool:
        """
        True if this degree is the described note.

        A given octave must equal the fundamental's octave. A missing
        adjustment counts as 0.
        """
        fundamental = self._fundamental
        if fundamental is None or pitch is None:
            return False
        if octave is None:
            return self._matches_pitch(fundamental, pitch, accidental, adjustment or 0)
        if fundamental.octave != octave:
            return False
        return fundamental.distance_to(octave, pitch, accidental, adjustment or 0) == 0

    def contains_pitch(
        self,
        pitch: Pitch,
        accidental: Accidental | None = None,
        adjustment: float | None = None,
    ) -> bool:
        """
        True if this degree has the described pitch in any octave.

        A missing adjustment counts as 0.
        """
        if self._fundamental is None or pitch is None:
            return False
        return self._matches_pitch(self._fundamental, pitch, accidental, adjustment or 0)

    def contains_note(self, note: Note | None, *adjustment: float | None) -> bool:
        """
        True if this degree is the given note.

        With no adjustment argument the note's own adjustment is used; a
        leading None replaces it with 0; any other value replaces it.
        """
        if note is None:
            return False
        if not adjustment:
            value = note.adjustment
        elif adjustment[0] is None:
            value = 0
        else:
            value = adjustment[0]
        return self.contains(note.octave, note.pitch, note.accidental, value)

    @staticmethod
    def _matches_pitch(
        fundamental: Note, pitch: Pitch, accidental: Accidental | None, adjustment: float
    ) -> bool:
        distance = fundamental.distance_to(None, pitch, accidental, adjustment)
        return distance % CENTS_PER_OCTAVE == 0

    def __repr__(self) -> str:
        return f"ScaleRange(degree={self._degree}, fundamental={self._fundamental})"


class Scale:
    """
    An ordered sequence of intervals with an optional root note.

    The intervals are fixed at construction. The root can be replaced at any
    time with set_root(), which discards every cached degree in one step.

    Examples:
        Scale([200, 200, 100, 200, 200, 200, 100], Note.parse("C4"), "Major")
        Scale([Interval.M2, Interval.m2, Interval.M2])  # template
    """

    def __init__(
        self,
        intervals: Iterable[IntervalLike | None] | None,
        root: Note | None = None,
        symbol: str | None = None,
    ):
        """
        Create a scale.

        Args:
            intervals: Steps between adjacent degrees, as Interval or cents
            root: Root note, or None for a template
            symbol: Display label

        Raises:
            ScaleConstructionError: If intervals is None, empty, or holds None
        """
        if intervals is None:
            raise ScaleConstructionError(ErrorMessages.NO_INTERVALS)

        steps: list[Interval] = []
        for index, interval in enumerate(intervals):
            if interval is None:
                raise ScaleConstructionError(ErrorMessages.NONE_INTERVAL.format(index=index))
            steps.append(interval if isinstance(interval, Interval) else Interval(interval))

        if not steps:
            raise ScaleConstructionError(ErrorMessages.NO_INTERVALS)

        self._intervals: tuple[Interval, ...] = tuple(steps)
        self._root = root
        self.symbol = symbol
        self._degrees: DegreeCache[ScaleRange] = DegreeCache(len(steps) + 1, self._new_range)

    @classmethod
    def from_notes(cls, *notes: Note, symbol: str | None = None) -> Scale:
        """
        Create a scale from its notes.

        Intervals are the distances between consecutive notes; the first
        note becomes the root.
        """
        if len(notes) < 2:
            raise ScaleConstructionError(ErrorMessages.NO_INTERVALS)
        intervals = [
            Interval(round(previous.distance(note))) for previous, note in zip(notes, notes[1:])
        ]
        return cls(intervals, notes[0], symbol)

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    @property
    def intervals(self) -> tuple[Interval, ...]:
        return self._intervals

    @property
    def adjustments(self) -> tuple[int, ...]:
        """Cents each interval deviates from its nearest semitone."""
        return tuple(interval.adjustment for interval in self._intervals)

    @property
    def root(self) -> Note | None:
        return self._root

    @root.setter
    def root(self, root: Note | None) -> None:
        self.set_root(root)

    @property
    def is_template(self) -> bool:
        return self._root is None

    def set_root(self, root: Note | None) -> None:
        """Replace the root and discard every cached degree atomically."""

        def replace() -> None:
            self._root = root

        self._degrees.invalidate(before_clear=replace)

    def size(self) -> int:
        """Number of notes in the scale: one more than the intervals."""
        return len(self._intervals) + 1

    @property
    def cents(self) -> int:
        """Total width in cents between the lowest and highest note."""
        return _span(interval.cents for interval in self._intervals)

    @property
    def semitones(self) -> int:
        """Total width in cents, rounded to semitones after summing."""
        return round_semitones(self.cents)

    def length(self) -> int:
        """
        Total width in semitones, rounding each interval before summing.

        May differ slightly from the semitones property when intervals
        are not whole semitones.
        """
        return _span(interval.semitones for interval in self._intervals)

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def is_ascending(self) -> bool:
        """No interval descends and the scale ends above where it starts."""
        total = 0
        for interval in self._intervals:
            if interval.cents < 0:
                return False
            total += interval.cents
        return total > 0

    def is_descending(self) -> bool:
        """No interval ascends and the scale ends below where it starts."""
        total = 0
        for interval in self._intervals:
            if interval.cents > 0:
                return False
            total += interval.cents
        return total < 0

    def is_chromatic(self) -> bool:
        """Twelve identical half steps, ascending or descending."""
        if len(self._intervals) != 12:
            return False
        first = self._intervals[0]
        if not first.equals_ignore_direction(Interval.MINOR_SECOND):
            return False
        return all(interval.cents == first.cents for interval in self._intervals[1:])

    def is_diatonic(self) -> bool:
        """
        True if the scale passes the diatonic step check.

        The step check only runs for scales whose interval count is not 7;
        a 7-interval scale reports False. See has_diatonic_steps() for the
        step check alone.
        """
        if len(self._intervals) != 7:
            return self.has_diatonic_steps()
        return False

    def has_diatonic_steps(self) -> bool:
        """
        Whole and half steps laid out like a diatonic scale.

        All steps move in the same direction, exactly two are half steps,
        the rest are whole steps, and two or three whole steps separate the
        half steps.
        """
        direction = _sign(self._intervals[0].cents)
        first_half_step = second_half_step = -1
        for index, interval in enumerate(self._intervals):
            if _sign(interval.cents) != direction:
                return False

            if interval.equals_ignore_direction(Interval.MINOR_SECOND):
                if first_half_step == -1:
                    first_half_step = index
                elif second_half_step == -1:
                    second_half_step = index
                else:
                    return False
            elif not interval.equals_ignore_direction(Interval.MAJOR_SECOND):
                return False

        return second_half_step - first_half_step - 1 in (2, 3)

    # ------------------------------------------------------------------
    # Equivalence
    # ------------------------------------------------------------------

    def has_equal_intervals(self, other: Scale | None) -> bool:
        """Same intervals in the same order. Adjustments are not compared."""
        if other is None or len(self._intervals) != len(other._intervals):
            return False
        return all(a.cents == b.cents for a, b in zip(self._intervals, other._intervals))

    def has_equal_interval_sequence(self, other: Scale | None, start: int | None = None) -> bool:
        """
        True if other's intervals follow this scale's intervals cyclically.

        With a start index, this scale is read from that interval, wrapping
        around, and compared with every interval of other. Without one, any
        start matches; this is how modes of a scale are recognised.
        """
        if other is None:
            return False

        count = len(self._intervals)
        if start is None:
            if count != len(other._intervals):
                return False
            return any(self.has_equal_interval_sequence(other, i) for i in range(count))

        if not 0 <= start < count:
            return False
        return all(
            self._intervals[(start + j) % count].cents == interval.cents
            for j, interval in enumerate(other._intervals)
        )

    def has_equal_note_sequence(self, other: Scale | None) -> bool:
        """
        True if other starts on one of this scale's notes and continues it.

        C major and A minor share a note sequence: A is the sixth note of
        C major and the intervals from there match A minor.

        Every note is tried as a starting degree, including the closing one,
        which wraps around to the first interval.
        """
        if other is None or other._root is None:
            return False
        count = len(self._intervals)
        if count != len(other._intervals):
            return False

        for degree, note in enumerate(self.notes()):
            if note.equals_ignore_pitch_and_octave(other._root) and self.has_equal_interval_sequence(
                other, degree % count
            ):
                return True
        return False

    def equals_ignore_pitch(self, other: Scale | None) -> bool:
        """
        Same intervals and same sounding root, whatever its spelling.

        Roots are skipped when either scale is a template.
        """
        if other is None:
            return False
        return (
            self._root is None or other._root is None or self._root.equals_ignore_pitch(other._root)
        ) and self.has_equal_intervals(other)

    def equals_ignore_pitch_and_octave(self, other: Scale | None) -> bool:
        """
        Same intervals and same root pitch class, in any octave or spelling.

        Roots are skipped when either scale is a template.
        """
        if other is None:
            return False
        return (
            self._root is None
            or other._root is None
            or self._root.equals_ignore_pitch_and_octave(other._root)
        ) and self.has_equal_intervals(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scale):
            return NotImplemented
        roots_match = (
            self._root is None
            or other._root is None
            or (
                (self._root.octave is None or other._root.octave is None)
                and self._root.equals_ignore_octave(other._root)
            )
            or self._root == other._root
        )
        return roots_match and self.has_equal_intervals(other)

    def __hash__(self) -> int:
        return hash(tuple(interval.cents for interval in self._intervals))

    def test(self, other: Scale | None) -> bool:
        """
        True if this scale is contained in other.

        A template matches anywhere in other's cycle of intervals. A rooted
        scale must match starting at the degree of other that holds its root;
        a root found only at the closing degree is not contained.
        """
        if other is None or not other._intervals or len(self._intervals) > len(other._intervals):
            return False

        count = len(other._intervals)
        if self._root is None:
            return any(other.has_equal_interval_sequence(self, start) for start in range(count))

        degree = other.index_of_pitch(self._root.pitch, self._root.accidental)
        if degree >= count:
            return False
        return other.has_equal_interval_sequence(self, degree)

    # ------------------------------------------------------------------
    # Degrees and search
    # ------------------------------------------------------------------

    def apply(self, degree: int) -> ScaleRange | None:
        """
        The range for a degree, or None if the degree is out of range.

        Each degree is built once and reused until the root changes.
        """
        return self._degrees.get(degree)

    def note_at(self, degree: int) -> Note | None:
        """
        The note at a degree, computed from the current root.

        Returns None for a template or an out-of-range degree.
        """
        root = self._root
        if root is None or not 0 <= degree < self.size():
            return None

        if degree == 0:
            return root

        offset = sum(interval.cents for interval in self._intervals[:degree])
        if len(self._intervals) == 7 and self.has_diatonic_steps():
            spelled = self._spell_diatonic(root, degree, offset)
            if spelled is not None:
                return spelled
        return root.transpose(offset)

    def _spell_diatonic(self, root: Note, degree: int, offset: int) -> Note | None:
        """Spell a degree on the letter `degree` steps from the root letter."""
        step = 1 if self.is_ascending() else -1
        octave_shift, letter_index = divmod(_LETTERS.index(root.pitch) + step * degree, 7)
        octave = (root.octave if root.octave is not None else DEFAULT_OCTAVE) + octave_shift
        difference = root.cents + offset - Note(_LETTERS[letter_index], octave).cents
        semitones = round_semitones(difference)
        accidental = with_semitone(semitones)
        if accidental is None:
            return None
        note = Note(
            _LETTERS[letter_index],
            octave,
            accidental,
            difference - semitones * CENTS_PER_SEMITONE,
        )
        return note if root.octave is not None else note.without_octave()

    def _new_range(self, degree: int) -> ScaleRange:
        return ScaleRange(self, degree, self.note_at(degree))

    def notes(self) -> Iterator[Note]:
        """The notes of the scale, root first. Templates have none."""
        if self._root is None:
            return
        for degree in range(self.size()):
            scale_range = self.apply(degree)
            if scale_range is None:
                return
            fundamental = scale_range.get_fundamental()
            if fundamental is not None:
                yield fundamental

    def __iter__(self) -> Iterator[Note]:
        return self.notes()

    def index_of(
        self,
        octave: int | None,
        pitch: Pitch,
        accidental: Accidental | None = None,
        adjustment: float | None = None,
    ) -> int:
        """
        The first degree holding the described note.

        Returns size() if no degree matches or the scale is a template.
        """
        if self._root is None:
            return self.size()
        for degree in range(self.size()):
            scale_range = self.apply(degree)
            if scale_range is not None and scale_range.contains(octave, pitch, accidental, adjustment):
                return degree
        return self.size()

    def index_of_pitch(self, pitch: Pitch, accidental: Accidental | None = None) -> int:
        """The first degree with the described pitch in any octave, or size()."""
        if self._root is None:
            return self.size()
        for degree in range(self.size()):
            scale_range = self.apply(degree)
            if scale_range is not None and scale_range.contains_pitch(pitch, accidental):
                return degree
        return self.size()

    def index_of_note(self, note: Note | None) -> int:
        """The first degree equal to the note, or size()."""
        if self._root is None:
            return self.size()
        for degree in range(self.size()):
            scale_range = self.apply(degree)
            if scale_range is not None and scale_range.contains_note(note):
                return degree
        return self.size()

    def contains(self, note: Note | None, *degrees: int) -> bool:
        """True if the note is at any of the given degrees (all when none given)."""
        if note is None:
            return False
        for degree in degrees or range(self.size()):
            scale_range = self.apply(degree)
            if scale_range is not None and scale_range.contains_note(note):
                return True
        return False

    def __contains__(self, note: object) -> bool:
        return isinstance(note, Note) and self.contains(note)

    # ------------------------------------------------------------------
    # Derived scales
    # ------------------------------------------------------------------

    def with_root(self, root: Note | None) -> Scale:
        """A new scale with the same intervals and symbol on another root."""
        return Scale(self._intervals, root, self.symbol)

    def mode(self, degree: int, symbol: str | None = None) -> Scale:
        """
        The rotation of this scale starting at a degree.

        The new scale is rooted at that degree's note when this scale has a
        root.
        """
        count = len(self._intervals)
        if not 0 <= degree < count:
            raise ValueError(f"Mode degree must be between 0 and {count - 1}, got {degree}")
        rotated = self._intervals[degree:] + self._intervals[:degree]
        return Scale(rotated, self.note_at(degree), symbol)

    def reversed(self) -> Scale:
        """The same notes walked the other way, rooted at the last note."""
        intervals = [interval.reverse() for interval in reversed(self._intervals)]
        return Scale(intervals, self.note_at(len(self._intervals)), self.symbol)

    def __str__(self) -> str:
        parts = []
        if self._root is not None:
            parts.append(f"{self._root.pitch.name}{self._root.accidental.symbol.strip()}")
        if self.symbol:
            parts.append(self.symbol)
        return " ".join(parts)

    def __repr__(self) -> str:
        cents = [interval.cents for interval in self._intervals]
        return f"Scale({cents!r}, root={self._root!r}, symbol={self.symbol!r})"
