"""Observability – severity levels understood by :class:`StructuredLogger`."""
from __future__ import annotations

from enum import Enum

from reqlog.config.validation import InvalidSettingValueError


class LogLevel(str, Enum):
    """Minimum severity; ``error`` is the most severe, ``trace`` the least."""

    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"
    TRACE = "trace"

    @property
    def severity(self) -> int:
        return SEVERITY[self.value]

    @classmethod
    def parse(cls, value: "LogLevel | str") -> "LogLevel":
        """Accept an enum member or a case-insensitive level name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().lower()
            name = _ALIASES.get(name, name)
            for member in cls:
                if member.value == name:
                    return member
        raise InvalidSettingValueError(
            "level", value, f"expected one of {', '.join(m.value for m in cls)}"
        )


#: Numeric severity per logger method name.
SEVERITY: dict[str, int] = {
    "error": 50,
    "warn": 40,
    "warning": 40,
    "info": 30,
    "debug": 20,
    "trace": 10,
}

_ALIASES = {"warning": "warn"}

__all__ = ["SEVERITY", "LogLevel"]
