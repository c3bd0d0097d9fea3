"""Observability – Logger protocol handed to request handlers."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Logger(Protocol):
    """Leveled structured logger: an event name plus keyword fields."""

    def error(self, event: str | None = None, **kw: Any) -> Any: ...
    def warn(self, event: str | None = None, **kw: Any) -> Any: ...
    def info(self, event: str | None = None, **kw: Any) -> Any: ...
    def debug(self, event: str | None = None, **kw: Any) -> Any: ...
    def trace(self, event: str | None = None, **kw: Any) -> Any: ...
    def bind(self, **new_values: Any) -> "Logger": ...


__all__ = ["Logger"]
