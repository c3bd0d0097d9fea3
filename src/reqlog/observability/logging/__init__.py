"""Observability – structured logging."""
from reqlog.observability.logging.factory import PrettyOptions, StructuredLogger, create_logger
from reqlog.observability.logging.levels import SEVERITY, LogLevel
from reqlog.observability.logging.processors import CorrelationProcessor, LevelFilter, add_level
from reqlog.observability.logging.protocol import Logger

__all__ = [
    "SEVERITY",
    "CorrelationProcessor",
    "LevelFilter",
    "LogLevel",
    "Logger",
    "PrettyOptions",
    "StructuredLogger",
    "add_level",
    "create_logger",
]
