"""Observability – correlation, logging, timing."""

from reqlog.observability.correlation import CorrelationContext, RequestContext
from reqlog.observability.logging import LogLevel, PrettyOptions, StructuredLogger, create_logger
from reqlog.observability.timing import format_time, hrtime

__all__ = [
    "CorrelationContext",
    "LogLevel",
    "PrettyOptions",
    "RequestContext",
    "StructuredLogger",
    "create_logger",
    "format_time",
    "hrtime",
]
