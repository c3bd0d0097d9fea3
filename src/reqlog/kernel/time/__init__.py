"""Kernel time – monotonic clock port + implementations."""
from reqlog.kernel.time.clock import (
    SYSTEM_CLOCK,
    FrozenMonotonicClock,
    MonotonicClock,
    SystemMonotonicClock,
)

__all__ = ["SYSTEM_CLOCK", "FrozenMonotonicClock", "MonotonicClock", "SystemMonotonicClock"]
