"""
Invariant violations for the search engine.

"Unknown" is not an error: it is the value (``None``) a predicate returns to
ask for more of the prefix, and it never leaves the engine. The faults below
are programming errors. None of them is retried.

Faults:
    REENTRANT_SEARCH — a predicate started a search inside an active search
    OUT_OF_RANGE     — a strict sequence was read past its end
    UNDECIDED        — a predicate that must be total answered "unknown"
"""

from __future__ import annotations

from enum import Enum


class Fault(Enum):
    """Fault codes carried by every InvariantViolation."""
    REENTRANT_SEARCH = "reentrant_search"
    OUT_OF_RANGE = "out_of_range"
    UNDECIDED = "undecided"


class InvariantViolation(Exception):
    """Raised when a caller breaks a contract the engine relies on."""

    def __init__(self, fault: Fault, reason: str):
        self.fault = fault
        self.reason = reason
        super().__init__(f"[{fault.value}] {reason}")


class ReentrantSearchError(InvariantViolation):
    """A second search frame was started on a thread that already runs one."""

    def __init__(self, reason: str = "Multiple active ForSome frames on the same thread"):
        super().__init__(Fault.REENTRANT_SEARCH, reason)


class OutOfRangeError(InvariantViolation, IndexError):
    """A strict bit sequence was asked for a position it does not hold."""

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(
            Fault.OUT_OF_RANGE,
            f"index {index} is outside a sequence of length {length}",
        )


class UndecidedError(InvariantViolation):
    """A predicate required to be total returned None."""

    def __init__(self, reason: str):
        super().__init__(Fault.UNDECIDED, reason)
