"""Framework-agnostic pieces of the request logger: options, IP resolution, settings."""
from reqlog.middleware.ip import UNKNOWN_IP, resolve_ip
from reqlog.middleware.options import (
    DEFAULT_IP_HEADERS,
    DEFAULT_REQUEST_ID_HEADER,
    DEFAULT_RESPONSE_TIME_HEADER,
    IpExtractor,
    LoggerOptions,
    RequestIdGenerator,
    ResolvedLoggerOptions,
    build_options,
    uuid_generator,
)
from reqlog.middleware.settings import RequestLoggerSettings

__all__ = [
    "DEFAULT_IP_HEADERS",
    "DEFAULT_REQUEST_ID_HEADER",
    "DEFAULT_RESPONSE_TIME_HEADER",
    "UNKNOWN_IP",
    "IpExtractor",
    "LoggerOptions",
    "RequestIdGenerator",
    "RequestLoggerSettings",
    "ResolvedLoggerOptions",
    "build_options",
    "resolve_ip",
    "uuid_generator",
]
