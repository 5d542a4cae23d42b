"""
Example functions over infinite bit sequences.

Each reads a few positions, some chosen by earlier reads, so the engine
cannot know in advance which bits they need.
"""

from __future__ import annotations

from typing import Callable, Optional

from .sequences import BitSequence


def func_f(a: BitSequence) -> Optional[bool]:
    """``a[4] * 7 + a[7 * a[4]] * a[7]``, as a bit."""
    t0 = a.get(4)
    if t0 is None:
        return None
    t1 = a.get(t0 * 7)
    if t1 is None:
        return None
    t2 = a.get(7)
    if t2 is None:
        return None
    return bool(t0 * 7 + t1 * t2)


def func_g(a: BitSequence) -> Optional[bool]:
    """``a[a[4] + 11 * a[7]] * a[4]``, as a bit."""
    t0 = a.get(4)
    if t0 is None:
        return None
    t1 = a.get(7)
    if t1 is None:
        return None
    t2 = a.get(t0 + 11 * t1)
    if t2 is None:
        return None
    return bool(t2 * t0)


# Names accepted on the command line
EXAMPLE_FUNCTIONS: dict[str, Callable[[BitSequence], Optional[bool]]] = {
    "f": func_f,
    "g": func_g,
}


def get_example(name: str) -> Callable[[BitSequence], Optional[bool]]:
    """Look up an example function by name."""
    try:
        return EXAMPLE_FUNCTIONS[name.lower()]
    except KeyError:
        known = ", ".join(sorted(EXAMPLE_FUNCTIONS))
        raise KeyError(f"unknown example function {name!r}, expected one of: {known}") from None
