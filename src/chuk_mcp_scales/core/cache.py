"""
Degree cache - lazily built, thread-safe slots indexed by scale degree.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class DegreeCache(Generic[T]):
    """
    A fixed number of slots filled on first access.

    Reads of a populated slot take no lock. An empty slot is filled under
    the cache lock with check-lock-recheck, so concurrent callers asking for
    the same degree get the same object and the factory runs once per slot.
    invalidate() clears every slot under the same lock, so no caller sees a
    half-cleared cache.

    lock, peek() and populated() are inspection hooks: they let callers
    and tests observe the slots without filling them.
    """

    def __init__(self, size: int, factory: Callable[[int], T]):
        """
        Initialize the cache.

        Args:
            size: Number of slots (degrees)
            factory: Builds the value for a degree; called with the lock held
        """
        self._slots: list[T | None] = [None] * size
        self._factory = factory
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._slots)

    @property
    def lock(self) -> threading.RLock:
        """The lock guarding population and invalidation."""
        return self._lock

    def get(self, degree: int) -> T | None:
        """
        Get the value for a degree, building it on first access.

        Returns None if the degree is out of range.
        """
        if not 0 <= degree < len(self._slots):
            return None

        value = self._slots[degree]
        if value is None:
            with self._lock:
                value = self._slots[degree]
                if value is None:
                    value = self._factory(degree)
                    self._slots[degree] = value
        return value

    def peek(self, degree: int) -> T | None:
        """Get the value for a degree without building it."""
        if not 0 <= degree < len(self._slots):
            return None
        return self._slots[degree]

    def populated(self) -> int:
        """Number of slots currently holding a value."""
        return sum(1 for value in self._slots if value is not None)

    def invalidate(self, before_clear: Callable[[], None] | None = None) -> None:
        """
        Clear every slot as one step.

        Args:
            before_clear: Run under the lock just before clearing, so state
                the factory reads can change atomically with the clear
        """
        with self._lock:
            if before_clear is not None:
                before_clear()
            for degree in range(len(self._slots)):
                self._slots[degree] = None
