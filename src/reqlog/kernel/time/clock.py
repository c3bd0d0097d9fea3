"""Kernel time – monotonic Clock protocol + implementations."""
from __future__ import annotations

import time
from typing import Protocol


class MonotonicClock(Protocol):
    """Port: nanosecond monotonic clock, swappable for deterministic tests."""

    def now_ns(self) -> int: ...


class SystemMonotonicClock:
    """Production clock backed by :func:`time.perf_counter_ns`."""

    def now_ns(self) -> int:
        return time.perf_counter_ns()


class FrozenMonotonicClock:
    """Test clock pinned to a fixed reading."""

    def __init__(self, fixed_ns: int = 0) -> None:
        self._fixed_ns = fixed_ns

    def now_ns(self) -> int:
        return self._fixed_ns

    def advance(self, *, seconds: int = 0, milliseconds: int = 0, nanoseconds: int = 0) -> None:
        """Move the reading forward."""
        self._fixed_ns += seconds * 1_000_000_000 + milliseconds * 1_000_000 + nanoseconds


SYSTEM_CLOCK = SystemMonotonicClock()

__all__ = ["SYSTEM_CLOCK", "FrozenMonotonicClock", "MonotonicClock", "SystemMonotonicClock"]
