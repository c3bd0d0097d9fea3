"""Environment-driven settings for the request logger.

Example::

    REQLOG_LEVEL=debug
    REQLOG_LOG_FORMAT=json
    REQLOG_IP_HEADERS=CF-Connecting-IP,X-Forwarded-For

    settings = EnvSettingsLoader().load(RequestLoggerSettings)
    app = FastAPI(middleware=[logger_middleware(settings.to_options())])
"""
from __future__ import annotations

import dataclasses
import sys
from typing import ClassVar

from reqlog.config.settings import Settings
from reqlog.config.validation import InvalidSettingValueError
from reqlog.middleware.options import (
    DEFAULT_IP_HEADERS,
    DEFAULT_REQUEST_ID_HEADER,
    DEFAULT_RESPONSE_TIME_HEADER,
    LoggerOptions,
)
from reqlog.observability.logging import LogLevel, PrettyOptions

_FORMATS = ("pretty", "json")


@dataclasses.dataclass
class RequestLoggerSettings(Settings):
    _prefix: ClassVar[str] = "REQLOG"

    level: str = "info"
    log_with_request_id: bool = True
    request_log_enable: bool = True
    request_id_header_name: str = DEFAULT_REQUEST_ID_HEADER
    response_time_header_name: str = DEFAULT_RESPONSE_TIME_HEADER
    ip_headers: list[str] = dataclasses.field(default_factory=lambda: list(DEFAULT_IP_HEADERS))
    log_format: str = "pretty"
    colors: bool = True
    complete_on_error: bool = True

    def _validate(self) -> None:
        LogLevel.parse(self.level)
        if self.log_format.lower() not in _FORMATS:
            raise InvalidSettingValueError(
                "log_format", self.log_format, f"expected one of {', '.join(_FORMATS)}"
            )

    def to_options(self) -> LoggerOptions:
        """``json`` writes JSON lines to stdout; ``pretty`` renders for a terminal."""
        as_json = self.log_format.lower() == "json"
        return LoggerOptions(
            level=self.level,
            log_with_request_id=self.log_with_request_id,
            request_log_enable=self.request_log_enable,
            request_id_header_name=self.request_id_header_name,
            response_time_header_name=self.response_time_header_name,
            get_ip_from_headers=tuple(self.ip_headers),
            stream=sys.stdout if as_json else None,
            pretty_options=None if as_json else PrettyOptions(colors=self.colors),
            complete_on_error=self.complete_on_error,
        )


__all__ = ["RequestLoggerSettings"]
