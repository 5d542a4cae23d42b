"""
The search engine: does some infinite bit sequence satisfy a predicate?

The engine never builds an infinite sequence. It hands the predicate a
finite prefix (a PartialBitSequence) and enumerates assignments to the
positions it has fixed so far. When the predicate answers None it has
run out of bits; every position it asked for is added to the fixed set
and the enumeration starts over with the larger set.

Termination requires that the predicate's answer is decided by a finite
prefix for every sequence. A predicate that keeps asking for new
positions forever makes the search run forever.

Only one search may be active per thread. A predicate that starts a
search of its own would break the rule that None means the innermost
search ran out of bits, so that raises ReentrantSearchError.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Callable, Optional, Union

from . import config
from .errors import ReentrantSearchError, UndecidedError
from .naturals import SetOfNaturals
from .sequences import BitSequence, PartialBitSequence

logger = logging.getLogger(__name__)

Predicate = Callable[[BitSequence], Optional[bool]]


class Enumeration(Enum):
    """How candidate assignments over the present positions are visited."""
    BACKTRACKING = "backtracking"  # depth-first over the positions actually read
    COUNTING = "counting"          # binary counting over every present position


def resolve_enumeration(value: Union[Enumeration, str, None]) -> Enumeration:
    """Map None, a name, or an Enumeration to an Enumeration."""
    if value is None:
        value = config.ENUMERATION
    if isinstance(value, Enumeration):
        return value
    try:
        return Enumeration(str(value).strip().lower())
    except ValueError:
        choices = ", ".join(e.value for e in Enumeration)
        raise ValueError(f"unknown enumeration {value!r}, expected one of: {choices}") from None


# The SearchContext running on this thread, if any.
_active = threading.local()


def active_search() -> Optional[SearchContext]:
    """Return the search running on the current thread, or None."""
    return getattr(_active, "context", None)


class SearchContext:
    """
    State of one existential search.

    Holds the present positions, the scratch assignment and the positions
    requested during the current trial. Nothing outlives the search.

    A context is single-use and must be entered (``with``) before ``run``;
    entering claims the thread for the duration of the search.

    ``history`` records ``len(present)`` at the start of every round.
    """

    def __init__(self, enumeration: Union[Enumeration, str, None] = None):
        self.enumeration = resolve_enumeration(enumeration)
        self.present = SetOfNaturals()
        self.requested = SetOfNaturals()
        self.scratch: list[bool] = []
        self.rounds = 0
        self.trials = 0
        self.history: list[int] = []
        self.poisoned = False
        self._entered = False

    def __enter__(self) -> SearchContext:
        outer = active_search()
        if outer is not None:
            # The outer search must not return a value either.
            outer.poisoned = True
            logger.critical("Multiple active ForSome frames on the same thread!")
            raise ReentrantSearchError()
        if self._entered:
            raise RuntimeError("SearchContext is single-use")
        self._entered = True
        _active.context = self
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        _active.context = None
        return False

    # -------------------------------------------------------------------------
    # Search loop
    # -------------------------------------------------------------------------

    def run(self, predicate: Predicate) -> bool:
        """Return True iff some assignment makes ``predicate`` true."""
        if active_search() is not self:
            raise RuntimeError("SearchContext.run() called outside its with-block")

        while True:
            self.rounds += 1
            self.history.append(len(self.present))
            logger.debug(
                "Entering round %d with len(present) = %d",
                self.rounds, len(self.present),
            )

            self.scratch[:] = [False] * len(self.scratch)
            if self.enumeration is Enumeration.COUNTING:
                outcome = self._count(predicate)
            else:
                outcome = self._backtrack(predicate)

            if outcome is None:
                self._grow()
                continue

            if not outcome and logger.isEnabledFor(logging.DEBUG):
                logger.debug("Tried all possibilities with %s", " ".join(map(str, self.present)))
            logger.debug(
                "Search decided %s after %d rounds and %d trials",
                outcome, self.rounds, self.trials,
            )
            return outcome

    def _trial(self, predicate: Predicate) -> tuple[Optional[bool], PartialBitSequence]:
        """Evaluate the predicate once against the current scratch assignment."""
        self.trials += 1
        self.requested.clear()
        if config.TRACE_SCRATCH:
            logger.debug("Scratch = %s", " ".join("1" if b else "0" for b in self.scratch))

        view = PartialBitSequence(self.scratch, self.present, self.requested)
        result = predicate(view)

        if self.poisoned:
            raise ReentrantSearchError("Predicate started a nested search")
        if result is None and self.requested.size() == 0:
            raise UndecidedError("Predicate returned None without requesting a new position")
        return result, view

    def _count(self, predicate: Predicate) -> Optional[bool]:
        """
        Visit every assignment over the present positions by binary counting.

        The smallest present position is the lowest digit. Returns True,
        False when all assignments fail, or None when more bits are needed.
        """
        positions = list(self.present)
        for _ in range(1 << len(positions)):
            result, _view = self._trial(predicate)
            if result is None:
                return None
            if result:
                return True

            # Ripple-carry increment.
            for idx in positions:
                if not self.scratch[idx]:
                    self.scratch[idx] = True
                    break
                self.scratch[idx] = False
        return False

    def _backtrack(self, predicate: Predicate) -> Optional[bool]:
        """
        Depth-first walk over the present positions the predicate reads.

        A False answer after reading positions S covers every assignment
        that agrees on S, so only the read positions are branched on.
        Invariant: scratch is False outside the current read path.
        """
        while True:
            result, view = self._trial(predicate)
            if result is None:
                return None
            if result:
                return True

            path = view.reads
            while path and self.scratch[path[-1]]:
                self.scratch[path.pop()] = False
            if not path:
                return False
            self.scratch[path[-1]] = True

    def _grow(self) -> None:
        """Move the requested positions into present and widen scratch."""
        new_size = len(self.scratch)
        for idx in self.requested:
            logger.debug("New index requested: %d", idx)
            self.present.insert(idx)
            new_size = max(new_size, idx + 1)
        self.scratch.extend([False] * (new_size - len(self.scratch)))
        self.requested.clear()


def for_some(
    predicate: Predicate,
    enumeration: Union[Enumeration, str, None] = None,
) -> bool:
    """
    Decide whether some infinite bit sequence satisfies ``predicate``.

    Args:
        predicate: pure callable returning True, False, or None when it
            needs a position it was not given
        enumeration: candidate ordering (defaults to config.ENUMERATION)

    Raises:
        ReentrantSearchError: if called while another search runs on this thread
    """
    with SearchContext(enumeration) as context:
        return context.run(predicate)
