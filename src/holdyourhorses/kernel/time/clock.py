"""Kernel time – Clock protocol + implementations.

A clock is any zero-argument callable returning the current instant as a
float number of seconds.  Plain functions such as ``time.time`` satisfy the
protocol as well as the classes below.
"""
from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Port: current instant in seconds, totally ordered and subtractable."""

    def __call__(self) -> float: ...


class SystemClock:
    """Production clock reading the wall clock (seconds since the epoch)."""

    def __call__(self) -> float:
        return time.time()

    def __repr__(self) -> str:
        return "SystemClock()"


class MonotonicClock:
    """Clock backed by ``time.monotonic``; immune to wall-clock adjustments."""

    def __call__(self) -> float:
        return time.monotonic()

    def __repr__(self) -> str:
        return "MonotonicClock()"


class FrozenClock:
    """Test clock that only moves when told to."""

    def __init__(self, instant: float = 0.0) -> None:
        self._instant = float(instant)

    def __call__(self) -> float:
        return self._instant

    def advance(self, seconds: float) -> None:
        """Move the frozen time forward by *seconds*."""
        if seconds < 0:
            raise ValueError("FrozenClock cannot move backwards")
        self._instant += seconds

    def set(self, instant: float) -> None:
        """Pin the clock to an absolute *instant*."""
        self._instant = float(instant)

    def __repr__(self) -> str:
        return f"FrozenClock({self._instant!r})"


__all__ = ["Clock", "FrozenClock", "MonotonicClock", "SystemClock"]
