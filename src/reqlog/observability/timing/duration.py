"""Observability – high-resolution elapsed-time samples and their display form."""
from __future__ import annotations

import math
from collections.abc import Sequence
from numbers import Real
from typing import Any

from reqlog.kernel.time import SYSTEM_CLOCK, MonotonicClock

NS_PER_SECOND = 1_000_000_000

#: ``(seconds, nanoseconds)`` where ``0 <= nanoseconds < 1e9``.
HrTime = tuple[int, int]

_FALLBACK = "0ms"


def hrtime(start: HrTime | None = None, clock: MonotonicClock | None = None) -> HrTime:
    """Return the current monotonic time as ``(seconds, nanoseconds)``.

    When *start* is given, return the time elapsed since that sample instead.
    """
    now = (clock or SYSTEM_CLOCK).now_ns()
    if start is not None:
        now -= start[0] * NS_PER_SECOND + start[1]
    return divmod(now, NS_PER_SECOND)


def format_time(diff: Sequence[Any] | None) -> str:
    """Render an ``(seconds, nanoseconds)`` difference for humans.

    >>> format_time((0, 123))
    '123ns'
    >>> format_time((0, 1234))
    '1.23us'
    >>> format_time((0, 123456789))
    '123.46ms'
    >>> format_time((1, 0))
    '1.0s'

    Anything that is not a two-number sample yields ``"0ms"``; this function
    never raises.
    """
    try:
        seconds, nanos = _number(diff[0]), _number(diff[1])  # type: ignore[index]
    except (TypeError, IndexError, KeyError, ValueError, OverflowError):
        return _FALLBACK

    if seconds > 0:
        try:
            return _format_seconds(seconds, nanos)
        except (OverflowError, ValueError):
            return _FALLBACK
    if nanos < 1_000:
        return f"{nanos}ns"
    if nanos < 1_000_000:
        return f"{nanos / 1_000:.2f}us"
    return f"{nanos / 1_000_000:.2f}ms"


def _number(value: Any) -> int | float:
    # bool is an int subclass but never a valid sample part
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(value)
    if isinstance(value, int):
        return value
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(value)
    return int(value) if value.is_integer() else value


def _format_seconds(seconds: int | float, nanos: int | float) -> str:
    # millisecond precision, half-up, carried into the seconds part
    total_ns = int(seconds * NS_PER_SECOND + nanos)
    millis, rest = divmod(total_ns, 1_000_000)
    if rest * 2 >= 1_000_000:
        millis += 1
    whole, frac = divmod(millis, 1_000)
    return f"{whole}.{f'{frac:03d}'.rstrip('0') or '0'}s"


__all__ = ["NS_PER_SECOND", "HrTime", "format_time", "hrtime"]
