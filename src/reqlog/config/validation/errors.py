"""Config validation errors."""
from __future__ import annotations

from reqlog.kernel.errors import ReqlogError


class ConfigError(ReqlogError):
    """Middleware options or settings could not be turned into a working setup."""
    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """One option or environment setting holds a value reqlog cannot use.

    ``setting_name`` is the option field (``level``) or, when loaded from the
    environment, the variable (``REQLOG_LEVEL``).
    """
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(f"{setting_name}={value!r} rejected: {reason}")
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
