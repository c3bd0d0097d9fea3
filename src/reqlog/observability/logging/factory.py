"""Observability – root logger construction.

The root logger is built from an explicit processor chain and never touches
``structlog.configure`` or the stdlib root logger, so several middleware
instances with different levels and destinations can live in one process.
"""
from __future__ import annotations

import dataclasses
import sys
from typing import Any, TextIO

import structlog

from reqlog.observability.logging.levels import LogLevel
from reqlog.observability.logging.processors import LevelFilter, add_level


@dataclasses.dataclass(frozen=True)
class PrettyOptions:
    """Console rendering knobs used when no output stream is configured."""

    colors: bool = True
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"
    pad_event: int = 30
    sort_keys: bool = True


class _StreamLogger(structlog.PrintLogger):
    """``PrintLogger`` that also answers to ``trace``."""

    trace = structlog.PrintLogger.msg


class StructuredLogger(structlog.BoundLoggerBase):
    """Bound logger exposing ``error/warn/info/debug/trace``.

    ``bind()`` returns a new instance with merged context; the parent is left
    untouched.
    """

    def error(self, event: str | None = None, **kw: Any) -> Any:
        return self._proxy_to_logger("error", event, **kw)

    def warn(self, event: str | None = None, **kw: Any) -> Any:
        return self._proxy_to_logger("warn", event, **kw)

    warning = warn

    def info(self, event: str | None = None, **kw: Any) -> Any:
        return self._proxy_to_logger("info", event, **kw)

    def debug(self, event: str | None = None, **kw: Any) -> Any:
        return self._proxy_to_logger("debug", event, **kw)

    def trace(self, event: str | None = None, **kw: Any) -> Any:
        return self._proxy_to_logger("trace", event, **kw)

    @property
    def context(self) -> dict[str, Any]:
        """Copy of the bound context."""
        return dict(self._context)


def create_logger(
    level: LogLevel | str = LogLevel.INFO,
    stream: TextIO | None = None,
    pretty_options: PrettyOptions | None = None,
) -> StructuredLogger:
    """Build a root :class:`StructuredLogger`.

    Parameters
    ----------
    level:
        Minimum severity; records below it are dropped.
    stream:
        Destination for JSON lines.  When ``None`` records are rendered for
        humans on stdout instead.
    pretty_options:
        Console rendering options; ignored when *stream* is given.
    """
    min_level = LogLevel.parse(level)
    processors: list[Any] = [LevelFilter(min_level), add_level]

    if stream is None:
        pretty = pretty_options or PrettyOptions()
        processors += [
            structlog.processors.TimeStamper(fmt=pretty.timestamp_format, utc=False),
            structlog.dev.ConsoleRenderer(
                colors=pretty.colors,
                pad_event=pretty.pad_event,
                sort_keys=pretty.sort_keys,
            ),
        ]
        output: TextIO = sys.stdout
    else:
        processors += [
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer(),
        ]
        output = stream

    return StructuredLogger(_StreamLogger(output), processors, {})


__all__ = ["PrettyOptions", "StructuredLogger", "create_logger"]
