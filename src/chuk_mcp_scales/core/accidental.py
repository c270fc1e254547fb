"""
Accidental primitives.

Accidentals are fixed cents offsets applied to a natural pitch. The common
ones are canonical: a small closed registry of shared instances that callers
may compare by identity. Anything else is a custom accidental compared by
value.
"""

from __future__ import annotations

from typing import ClassVar

from chuk_mcp_scales.constants import AccidentalSymbol
from chuk_mcp_scales.core.pitch import round_semitones


class Accidental:
    """
    A cents offset with a display symbol.

    Canonical instances (DOUBLE_FLAT, FLAT, NATURAL, SHARP, DOUBLE_SHARP,
    NATURAL_FLAT, NATURAL_SHARP) are created once at import time. clone()
    hands them back unchanged; custom accidentals clone to an equal copy.
    """

    __slots__ = ("_symbol", "_cents", "_canonical")

    DOUBLE_FLAT: ClassVar[Accidental]
    FLAT: ClassVar[Accidental]
    NATURAL: ClassVar[Accidental]
    SHARP: ClassVar[Accidental]
    DOUBLE_SHARP: ClassVar[Accidental]
    NATURAL_FLAT: ClassVar[Accidental]
    NATURAL_SHARP: ClassVar[Accidental]

    def __init__(self, symbol: str, cents: int, *, _canonical: bool = False) -> None:
        self._symbol = symbol
        self._cents = int(cents)
        self._canonical = _canonical

    @classmethod
    def custom(cls, cents: int, symbol: str | None = None) -> Accidental:
        """Create a custom (non-canonical) accidental."""
        return cls(symbol if symbol is not None else f"{cents:+d}c", cents)

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def cents(self) -> int:
        return self._cents

    @property
    def semitones(self) -> int:
        """Offset rounded to the nearest semitone."""
        return round_semitones(self._cents)

    @property
    def is_canonical(self) -> bool:
        return self._canonical

    def clone(self) -> Accidental:
        """Canonical accidentals clone to themselves; custom ones to a copy."""
        if self._canonical:
            return self
        return Accidental(self._symbol, self._cents)

    def adjusted(self, *semitones: int | None) -> Accidental | None:
        """
        Shift this accidental by a number of semitones.

        Returns the canonical accidental at the resulting offset, self when
        the shift is zero, or None when no canonical accidental exists there.
        """
        shift = sum(s for s in semitones if s is not None)
        if shift == 0:
            return self
        return with_semitone(self.semitones + shift)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Accidental):
            return NotImplemented
        return self is other or self._cents == other._cents

    def __hash__(self) -> int:
        return hash(self._cents)

    def __repr__(self) -> str:
        for name in _CANONICAL_NAMES:
            if getattr(Accidental, name, None) is self:
                return f"Accidental.{name}"
        return f"Accidental.custom({self._cents}, {self._symbol!r})"

    def __str__(self) -> str:
        return self._symbol


_CANONICAL_NAMES = (
    "DOUBLE_FLAT",
    "FLAT",
    "NATURAL",
    "SHARP",
    "DOUBLE_SHARP",
    "NATURAL_FLAT",
    "NATURAL_SHARP",
)

Accidental.DOUBLE_FLAT = Accidental(AccidentalSymbol.DOUBLE_FLAT, -200, _canonical=True)
Accidental.FLAT = Accidental(AccidentalSymbol.FLAT, -100, _canonical=True)
Accidental.NATURAL = Accidental(AccidentalSymbol.NATURAL, 0, _canonical=True)
Accidental.SHARP = Accidental(AccidentalSymbol.SHARP, 100, _canonical=True)
Accidental.DOUBLE_SHARP = Accidental(AccidentalSymbol.DOUBLE_SHARP, 200, _canonical=True)
Accidental.NATURAL_FLAT = Accidental(AccidentalSymbol.NATURAL_FLAT, -100, _canonical=True)
Accidental.NATURAL_SHARP = Accidental(AccidentalSymbol.NATURAL_SHARP, 100, _canonical=True)

# Semitone offset -> canonical accidental
_BY_SEMITONE: dict[int, Accidental] = {
    -2: Accidental.DOUBLE_FLAT,
    -1: Accidental.FLAT,
    0: Accidental.NATURAL,
    1: Accidental.SHARP,
    2: Accidental.DOUBLE_SHARP,
}

# Accepted spellings -> canonical accidental
_BY_SYMBOL: dict[str, Accidental] = {
    "bb": Accidental.DOUBLE_FLAT,
    "♭♭": Accidental.DOUBLE_FLAT,
    "b": Accidental.FLAT,
    "♭": Accidental.FLAT,
    "": Accidental.NATURAL,
    "♮": Accidental.NATURAL,
    "#": Accidental.SHARP,
    "♯": Accidental.SHARP,
    "##": Accidental.DOUBLE_SHARP,
    "x": Accidental.DOUBLE_SHARP,
    "𝄪": Accidental.DOUBLE_SHARP,
    " b": Accidental.NATURAL_FLAT,
    " #": Accidental.NATURAL_SHARP,
}


def with_semitone(semitone: int) -> Accidental | None:
    """
    Get the canonical accidental for a semitone offset between -2 and 2.

    Returns None outside that range.
    """
    return _BY_SEMITONE.get(semitone)


def with_symbol(symbol: str) -> Accidental | None:
    """Get the canonical accidental spelled by a symbol, or None."""
    return _BY_SYMBOL.get(symbol)


Accidental.with_semitone = staticmethod(with_semitone)  # type: ignore[attr-defined]
Accidental.with_symbol = staticmethod(with_symbol)  # type: ignore[attr-defined]
