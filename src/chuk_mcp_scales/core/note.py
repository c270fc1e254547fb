"""
Note primitive - a concrete or octave-less note.

A note is a natural pitch letter, an accidental, an optional octave and an
optional adjustment in cents. Notes without an octave are pitch types: they
stand for the pitch in any octave.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from chuk_mcp_scales.constants import (
    A4_FREQUENCY,
    A4_NUMBER,
    CENTS_PER_OCTAVE,
    CENTS_PER_SEMITONE,
    DEFAULT_OCTAVE,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
)
from chuk_mcp_scales.core.accidental import Accidental, with_symbol
from chuk_mcp_scales.core.pitch import Pitch, PitchClass, round_semitones

_NOTE_PATTERN = re.compile(r"^\s*([A-Ga-g])(bb|##|b|#|x|♭♭|♭|♯|♮)?(-?\d+)?\s*$")


@dataclass(frozen=True, eq=False)
class Note:
    """
    A note: pitch letter, accidental, optional octave, adjustment in cents.

    Octaves follow the MIDI convention (C4 = 60, C-1 = 0).

    Three equivalence relations are available:
        note == other                         exact (octave, spelling, adjustment)
        note.equals_ignore_octave(other)      same spelling in any octave
        note.equals_ignore_pitch_and_octave() same pitch class, any spelling

    Examples:
        Note(Pitch.C, 4) = middle C
        Note(Pitch.F, 3, Accidental.SHARP) = F#3
        Note(Pitch.B, accidental=Accidental.FLAT) = Bb in any octave
    """

    pitch: Pitch
    octave: int | None = None
    accidental: Accidental = field(default=Accidental.NATURAL)
    adjustment: float = 0

    def __post_init__(self) -> None:
        if not isinstance(self.pitch, Pitch):
            raise ValueError(f"Pitch must be a Pitch, got {self.pitch!r}")
        if self.accidental is None:
            object.__setattr__(self, "accidental", Accidental.NATURAL)
        if self.adjustment is None:
            object.__setattr__(self, "adjustment", 0)

    # ------------------------------------------------------------------
    # Numeric views
    # ------------------------------------------------------------------

    @property
    def has_octave(self) -> bool:
        return self.octave is not None

    @property
    def pitch_class(self) -> PitchClass:
        """The chromatic pitch class, ignoring adjustment."""
        return PitchClass((self.pitch.order + self.accidental.semitones) % SEMITONES_PER_OCTAVE)

    @property
    def cents(self) -> float:
        """
        Absolute position in cents above C-1.

        Octave-less notes are placed in the default octave.
        """
        octave = self.octave if self.octave is not None else DEFAULT_OCTAVE
        return (
            ((octave + 1) * SEMITONES_PER_OCTAVE + self.pitch.order) * CENTS_PER_SEMITONE
            + self.accidental.cents
            + self.adjustment
        )

    @property
    def number(self) -> float:
        """MIDI note number, fractional when the note is adjusted."""
        return self.cents / CENTS_PER_SEMITONE

    @property
    def frequency(self) -> float:
        """Frequency in Hz, equal temperament with A4 = 440 Hz."""
        return A4_FREQUENCY * 2 ** ((self.number - A4_NUMBER) / SEMITONES_PER_OCTAVE)

    # ------------------------------------------------------------------
    # Distances
    # ------------------------------------------------------------------

    def distance_to(
        self,
        octave: int | None,
        pitch: Pitch,
        accidental: Accidental | None = None,
        adjustment: float | None = None,
    ) -> float:
        """
        Distance in cents from this note to the described note.

        Octaves only count when both are known.
        """
        accidental = accidental or Accidental.NATURAL
        octaves = 0 if octave is None or self.octave is None else octave - self.octave
        return (
            octaves * CENTS_PER_OCTAVE
            + (pitch.order - self.pitch.order) * CENTS_PER_SEMITONE
            + accidental.cents
            - self.accidental.cents
            + (adjustment or 0)
            - self.adjustment
        )

    def distance(self, note: Note) -> float:
        """Distance in cents from this note to another note."""
        return self.distance_to(note.octave, note.pitch, note.accidental, note.adjustment)

    # ------------------------------------------------------------------
    # Equivalence
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return (
            self.octave == other.octave
            and self.pitch is other.pitch
            and self.accidental == other.accidental
            and self.adjustment == other.adjustment
        )

    def __hash__(self) -> int:
        return hash((self.octave, self.pitch, self.accidental.cents, self.adjustment))

    def equals_ignore_octave(self, other: Note | None) -> bool:
        """Same pitch letter, accidental and adjustment, in any octave."""
        if other is None:
            return False
        return (
            self.pitch is other.pitch
            and self.accidental == other.accidental
            and self.adjustment == other.adjustment
        )

    def equals_ignore_pitch(self, other: Note | None) -> bool:
        """Same sounding pitch, regardless of spelling (C#4 equals Db4)."""
        if other is None:
            return False
        return self.distance(other) == 0

    def equals_ignore_pitch_and_octave(self, other: Note | None) -> bool:
        """Same pitch class and adjustment, regardless of spelling and octave."""
        if other is None:
            return False
        return (other.cents - self.cents) % CENTS_PER_OCTAVE == 0

    # ------------------------------------------------------------------
    # Derived notes
    # ------------------------------------------------------------------

    def transpose(self, cents: float, prefer_flats: bool | None = None) -> Note:
        """
        Move the note by a number of cents.

        The result is respelled from its position; spelling follows this
        note's accidental unless prefer_flats is given. Octave-less notes
        stay octave-less.
        """
        if prefer_flats is None:
            prefer_flats = self.accidental.cents < 0
        note = Note.from_cents(self.cents + cents, prefer_flats=prefer_flats)
        if self.octave is None:
            return note.without_octave()
        return note

    def with_octave(self, octave: int | None) -> Note:
        return Note(self.pitch, octave, self.accidental, self.adjustment)

    def without_octave(self) -> Note:
        return self.with_octave(None)

    def enharmonic(self) -> Note:
        """Respell with the opposite accidental (C# -> Db, Bb -> A#)."""
        if self.accidental == Accidental.NATURAL:
            return self
        note = Note.from_cents(self.cents, prefer_flats=self.accidental.cents > 0)
        return note if self.octave is not None else note.without_octave()

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_number(cls, number: int, prefer_flats: bool = False) -> Note:
        """Spell a MIDI note number. C4 = 60."""
        octave, semitone = divmod(int(number), SEMITONES_PER_OCTAVE)
        name = PitchClass(semitone).spell(prefer_flats=prefer_flats)
        accidental = with_symbol(name[1:]) or Accidental.NATURAL
        return cls(Pitch.parse(name[0]), octave - 1, accidental)

    @classmethod
    def from_cents(cls, cents: float, prefer_flats: bool = False) -> Note:
        """Spell an absolute cents position, keeping the remainder as adjustment."""
        semitones = round_semitones(cents)
        note = cls.from_number(semitones, prefer_flats=prefer_flats)
        adjustment = cents - semitones * CENTS_PER_SEMITONE
        if adjustment:
            return cls(note.pitch, note.octave, note.accidental, adjustment)
        return note

    @classmethod
    def parse(cls, text: str) -> Note:
        """
        Parse a note from a string like 'C4', 'F#', 'Bb3' or 'Cx2'.

        Octave is optional; without it the note is octave-less.
        """
        match = _NOTE_PATTERN.match(text)
        if not match:
            raise ValueError(ErrorMessages.INVALID_NOTE.format(note=text))
        letter, symbol, octave = match.groups()
        accidental = with_symbol(symbol or "")
        if accidental is None:
            raise ValueError(ErrorMessages.INVALID_NOTE.format(note=text))
        return cls(Pitch.parse(letter), int(octave) if octave is not None else None, accidental)

    def __str__(self) -> str:
        text = f"{self.pitch.name}{self.accidental.symbol.strip()}"
        if self.octave is not None:
            text += str(self.octave)
        if self.adjustment:
            text += f"{self.adjustment:+g}c"
        return text

    def __repr__(self) -> str:
        return f"Note.parse({str(self)!r})" if not self.adjustment else f"Note({self})"
