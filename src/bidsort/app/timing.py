"""Processor-time stopwatch reporting clock ticks and seconds."""

from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

TICKS_PER_SECOND = 1_000_000  # one tick per microsecond of processor time


@dataclass
class Timing:
    """Elapsed processor time of a timed block."""

    ticks: int = 0

    @property
    def seconds(self) -> float:
        return self.ticks / TICKS_PER_SECOND


@contextmanager
def stopwatch() -> Iterator[Timing]:
    """Time the enclosed block; the yielded Timing is filled in on exit.

    Usage:
        with stopwatch() as timing:
            selection_sort(bids)
        print(timing.ticks, timing.seconds)
    """
    timing = Timing()
    start = time.process_time_ns()
    try:
        yield timing
    finally:
        timing.ticks = (time.process_time_ns() - start) // 1_000
