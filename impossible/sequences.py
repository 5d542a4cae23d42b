"""
Bit sequences — the views a predicate reads from.

A bit sequence is conceptually infinite and never materialized. Reading a
position returns a bit, or ``None`` when the view cannot answer yet.

Variants (closed set):
    StrictBitSequence   — a finite array; reading past its end is a defect
    PartialBitSequence  — a finite prefix handed out by the search engine
    StridedBitSequence  — every ``stride``-th bit of another sequence
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from .errors import OutOfRangeError
from .naturals import SetOfNaturals


class BitSequence(ABC):
    """A possibly infinite sequence of bits."""

    @abstractmethod
    def get(self, idx: int) -> Optional[bool]:
        """Return the bit at ``idx``, or None if it is not available."""

    def __getitem__(self, idx: int) -> Optional[bool]:
        return self.get(idx)


class StrictBitSequence(BitSequence):
    """A fully known, finite run of bits."""

    def __init__(self, bits: Sequence[bool]):
        self._bits = tuple(bool(b) for b in bits)

    @classmethod
    def from_string(cls, text: str) -> StrictBitSequence:
        """Build from a string of ``0``/``1`` characters (spaces ignored)."""
        digits = "".join(text.split())
        if any(c not in "01" for c in digits):
            raise ValueError(f"bit string may only contain 0 and 1: {text!r}")
        return cls([c == "1" for c in digits])

    def get(self, idx: int) -> bool:
        if not 0 <= idx < len(self._bits):
            raise OutOfRangeError(idx, len(self._bits))
        return self._bits[idx]

    def __len__(self) -> int:
        return len(self._bits)

    def __repr__(self) -> str:
        return "StrictBitSequence('" + "".join("1" if b else "0" for b in self._bits) + "')"


class PartialBitSequence(BitSequence):
    """
    A finite prefix of an infinite sequence.

    Positions in ``present`` answer from ``values``. Any other position
    answers None and is recorded in ``requested``, which the caller
    inspects after the predicate returns.

    ``reads`` lists the present positions served, in first-read order.
    """

    def __init__(
        self,
        values: Sequence[bool],
        present: SetOfNaturals,
        requested: SetOfNaturals,
    ):
        self._values = values
        self._present = present
        self._requested = requested
        self._seen: set[int] = set()
        self.reads: list[int] = []

    def get(self, idx: int) -> Optional[bool]:
        if self._present.contains(idx):
            if idx not in self._seen:
                self._seen.add(idx)
                self.reads.append(idx)
            return self._values[idx]

        self._requested.insert(idx)
        return None


class StridedBitSequence(BitSequence):
    """
    Maps bit ``i`` to bit ``stride * i + offset`` of ``source``.

    With stride N and offsets 0..N-1 one sequence carries N sequences.
    """

    def __init__(self, source: BitSequence, stride: int, offset: int):
        if stride < 1 or not 0 <= offset < stride:
            raise ValueError(f"need stride >= 1 and 0 <= offset < stride, got {stride}, {offset}")
        self._source = source
        self._stride = stride
        self._offset = offset

    def get(self, idx: int) -> Optional[bool]:
        return self._source.get(idx * self._stride + self._offset)
