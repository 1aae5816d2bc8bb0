"""Timestamp sources for stamping local writes."""

from __future__ import annotations

import time
from collections.abc import Callable
from enum import StrEnum


class TimestampUnit(StrEnum):
    SECONDS = "s"
    MILLISECONDS = "ms"
    MICROSECONDS = "us"
    NANOSECONDS = "ns"


_NS_PER_UNIT: dict[TimestampUnit, int] = {
    TimestampUnit.SECONDS: 1_000_000_000,
    TimestampUnit.MILLISECONDS: 1_000_000,
    TimestampUnit.MICROSECONDS: 1_000,
    TimestampUnit.NANOSECONDS: 1,
}


def wall_clock(unit: TimestampUnit | str = TimestampUnit.MILLISECONDS) -> Callable[[], int]:
    """Return a callable producing integer epoch timestamps in *unit*.

    Raises ``ValueError`` for an unknown unit.
    """
    divisor = _NS_PER_UNIT[TimestampUnit(unit)]

    def _now() -> int:
        return time.time_ns() // divisor

    return _now


class LogicalClock:
    """Monotonic integer counter usable as a store clock.

    Every call returns a value strictly greater than any value returned or
    observed before.  A store using this clock observes every timestamp it
    applies, so local writes always follow merged ones.
    """

    def __init__(self, start: int = 0) -> None:
        self._value = start

    @property
    def value(self) -> int:
        return self._value

    def __call__(self) -> int:
        self._value += 1
        return self._value

    def observe(self, timestamp: int) -> None:
        """Advance past a timestamp seen on another replica."""
        if timestamp > self._value:
            self._value = timestamp
