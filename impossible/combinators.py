"""
Combinators built on for_some.

Every combinator threads "unknown" (None) through untouched: as soon as an
inner read or call answers None, the enclosing predicate returns None and
the engine supplies more bits. Results leaving ``for_every``, ``equal``,
``least`` and ``modulus`` are always decided.
"""

from __future__ import annotations

import itertools
from typing import Callable, Optional, TypeVar, Union

from . import config
from .errors import UndecidedError
from .search import Enumeration, Predicate, for_some
from .sequences import BitSequence, StridedBitSequence

T = TypeVar("T")

Function = Callable[[BitSequence], Optional[T]]
Predicate2 = Callable[[BitSequence, BitSequence], Optional[bool]]
EnumerationArg = Union[Enumeration, str, None]


def negate(predicate: Predicate) -> Predicate:
    """Flip a decided answer; None passes through."""
    def inverse(seq: BitSequence) -> Optional[bool]:
        value = predicate(seq)
        if value is None:
            return None
        return not value
    return inverse


def for_every(predicate: Predicate, enumeration: EnumerationArg = None) -> bool:
    """True iff every infinite bit sequence satisfies ``predicate``."""
    return not for_some(negate(predicate), enumeration)


def for_every2(predicate: Predicate2, enumeration: EnumerationArg = None) -> bool:
    """
    True iff ``predicate(a, b)`` holds for every pair of sequences.

    Both sequences live in one searched sequence: ``a`` on the even
    positions and ``b`` on the odd ones.
    """
    def interleaved(product: BitSequence) -> Optional[bool]:
        a = StridedBitSequence(product, stride=config.STRIDE_PAIR, offset=0)
        b = StridedBitSequence(product, stride=config.STRIDE_PAIR, offset=1)
        return predicate(a, b)
    return for_every(interleaved, enumeration)


def equal(f_a: Function, f_b: Function, enumeration: EnumerationArg = None) -> bool:
    """True iff ``f_a`` and ``f_b`` agree on every infinite bit sequence."""
    def check(seq: BitSequence) -> Optional[bool]:
        a = f_a(seq)
        if a is None:
            return None
        b = f_b(seq)
        if b is None:
            return None
        return a == b
    return for_every(check, enumeration)


def least(predicate: Callable[[int], Optional[bool]]) -> int:
    """
    Smallest natural satisfying ``predicate``, scanning upward from 0.

    The predicate must be total. Loops forever if no natural satisfies it.

    Raises:
        UndecidedError: if the predicate answers None
    """
    for i in itertools.count():
        value = predicate(i)
        if value is None:
            raise UndecidedError(f"least() predicate returned None for {i}")
        if value:
            return i


def eq(n: int, a: BitSequence, b: BitSequence) -> Optional[bool]:
    """Whether ``a`` and ``b`` agree on positions [0, n); None if either is unknown."""
    for i in range(n):
        ai = a.get(i)
        if ai is None:
            return None
        bi = b.get(i)
        if bi is None:
            return None
        if ai != bi:
            return False
    return True


def is_modulus(n: int, fn: Function, enumeration: EnumerationArg = None) -> bool:
    """True iff sequences agreeing on their first ``n`` bits give equal ``fn`` values."""
    def agrees(a: BitSequence, b: BitSequence) -> Optional[bool]:
        same_prefix = eq(n, a, b)
        if same_prefix is None:
            return None
        if not same_prefix:
            return True

        fa = fn(a)
        if fa is None:
            return None
        fb = fn(b)
        if fb is None:
            return None
        return fa == fb
    return for_every2(agrees, enumeration)


def modulus(fn: Function, enumeration: EnumerationArg = None) -> int:
    """
    Modulus of uniform continuity of ``fn``.

    The smallest ``n`` such that any two sequences agreeing on their first
    ``n`` positions give the same value.
    """
    return least(lambda n: is_modulus(n, fn, enumeration))
