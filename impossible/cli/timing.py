"""
Wall-clock timer for CLI commands.

Prints "Time taken in <id>: <value><unit>" when the block exits.
"""

from __future__ import annotations

import time
from typing import Optional, TextIO

UNITS = ("us", "ms", "s")


def format_duration(us: float) -> str:
    """Format microseconds with the largest unit that keeps the value >= 1."""
    unit_idx = 0
    while unit_idx < len(UNITS) and us >= 1000 ** unit_idx:
        unit_idx += 1
    if unit_idx != 0:
        unit_idx -= 1
    return f"{us / 1000 ** unit_idx:0.3f}{UNITS[unit_idx]}"


class Timer:
    """Context manager reporting how long its block took."""

    def __init__(self, label: str, stream: Optional[TextIO] = None):
        self.label = label
        self.stream = stream
        self.elapsed_us: Optional[float] = None
        self._start = 0.0

    def __enter__(self) -> Timer:
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed_us = (time.perf_counter() - self._start) * 1e6
        print(f"Time taken in {self.label}: {format_duration(self.elapsed_us)}", file=self.stream)
        return False
