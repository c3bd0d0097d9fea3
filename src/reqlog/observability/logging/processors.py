"""Observability – structlog processors.

* :class:`LevelFilter` drops events below the configured minimum level.
* :func:`add_level` writes the canonical level name into the event.
* :class:`CorrelationProcessor` injects the active request id into events
  emitted through application-wide structlog loggers.
"""
from __future__ import annotations

from typing import Any

import structlog

from reqlog.observability.logging.levels import SEVERITY, LogLevel


class LevelFilter:
    """structlog processor that raises :class:`structlog.DropEvent` below *min_level*."""

    def __init__(self, min_level: LogLevel | str = LogLevel.INFO) -> None:
        self._threshold = LogLevel.parse(min_level).severity

    def __call__(
        self,
        logger: Any,  # noqa: ARG002
        method_name: str,
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        if SEVERITY.get(method_name, 0) < self._threshold:
            raise structlog.DropEvent
        return event_dict


def add_level(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
    """Store the level under ``level``; ``warning`` is reported as ``warn``."""
    event_dict["level"] = "warn" if method_name == "warning" else method_name
    return event_dict


class CorrelationProcessor:
    """structlog processor that injects the request id from :class:`CorrelationContext`.

    Usage::

        import structlog
        from reqlog.observability.logging import CorrelationProcessor

        structlog.configure(processors=[CorrelationProcessor(), ...])

    Events that already carry the field are left alone.
    """

    def __init__(self, field_name: str = "reqId") -> None:
        self._field = field_name

    def __call__(
        self,
        logger: Any,  # noqa: ARG002
        method_name: str,  # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        from reqlog.observability.correlation import CorrelationContext

        ctx = CorrelationContext.get()
        if ctx is not None:
            event_dict.setdefault(self._field, ctx.request_id)
        return event_dict


__all__ = ["CorrelationProcessor", "LevelFilter", "add_level"]
