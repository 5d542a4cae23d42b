"""
Set of natural numbers, backed by a growable list of flags.

Used by the engine for the positions fixed so far ("present") and the
positions a predicate asked for but could not get ("requested").
Members are only ever added; ``clear()`` empties the whole set.
"""

from __future__ import annotations

from typing import Callable, Iterator


class SetOfNaturals:
    """Sparse set of non-negative integers with ascending iteration."""

    def __init__(self) -> None:
        self._rep: list[bool] = []
        self._size = 0

    def clear(self) -> None:
        self._rep.clear()
        self._size = 0

    def insert(self, idx: int) -> None:
        """Add ``idx``, growing storage to ``idx + 1`` when needed."""
        if idx < 0:
            raise ValueError(f"natural expected, got {idx}")
        if idx >= len(self._rep):
            self._rep.extend([False] * (idx + 1 - len(self._rep)))
        if not self._rep[idx]:
            self._rep[idx] = True
            self._size += 1

    def contains(self, idx: int) -> bool:
        return 0 <= idx < len(self._rep) and self._rep[idx]

    def size(self) -> int:
        return self._size

    def for_each(self, func: Callable[[int], None]) -> None:
        """Call ``func`` on every member, smallest first."""
        for idx in self:
            func(idx)

    def max(self) -> int:
        """Largest member, or -1 for the empty set."""
        for idx in range(len(self._rep) - 1, -1, -1):
            if self._rep[idx]:
                return idx
        return -1

    def __contains__(self, idx: int) -> bool:
        return self.contains(idx)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return (i for i, flag in enumerate(self._rep) if flag)

    def __repr__(self) -> str:
        return f"SetOfNaturals({list(self)})"
