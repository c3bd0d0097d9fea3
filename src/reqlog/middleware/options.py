"""Request logger options and their resolution against defaults.

:class:`LoggerOptions` is what callers pass in; every field left at ``None``
falls back to its default independently of the others.
:func:`build_options` turns it into a fully populated, immutable
:class:`ResolvedLoggerOptions` once, at setup time.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, TextIO
from uuid import uuid4

from reqlog.config.validation import InvalidSettingValueError
from reqlog.observability.logging import LogLevel, PrettyOptions

if TYPE_CHECKING:
    from starlette.requests import Request

#: Produces the correlation id for a request.
RequestIdGenerator = Callable[["Request"], str]
#: Derives the client address for a request, replacing header probing.
IpExtractor = Callable[["Request"], str]

DEFAULT_REQUEST_ID_HEADER = "X-Request-Id"
DEFAULT_RESPONSE_TIME_HEADER = "X-Response-Time"
DEFAULT_IP_HEADERS: tuple[str, ...] = ("X-Real-Ip", "X-Forwarded-For")


def uuid_generator(request: Request) -> str:  # noqa: ARG001
    """Default generator: a random UUID v4."""
    return str(uuid4())


@dataclasses.dataclass(frozen=True)
class LoggerOptions:
    """User-facing options; ``None`` means "use the default"."""

    level: LogLevel | str | None = None
    log_with_request_id: bool | None = None
    request_log_enable: bool | None = None
    request_id_header_name: str | None = None
    response_time_header_name: str | None = None
    generator: RequestIdGenerator | None = None
    get_ip_address: IpExtractor | None = None
    get_ip_from_headers: Sequence[str] | None = None
    stream: TextIO | None = None
    pretty_options: PrettyOptions | None = None
    complete_on_error: bool | None = None


@dataclasses.dataclass(frozen=True)
class ResolvedLoggerOptions:
    """Fully resolved configuration shared by every request."""

    level: LogLevel
    log_with_request_id: bool
    request_log_enable: bool
    request_id_header_name: str
    response_time_header_name: str
    generator: RequestIdGenerator
    get_ip_address: IpExtractor | None
    get_ip_from_headers: tuple[str, ...]
    stream: TextIO | None
    pretty_options: PrettyOptions | None
    complete_on_error: bool


def _pick(value: Any, default: Any) -> Any:
    return default if value is None else value


def _header_name(setting: str, value: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidSettingValueError(setting, value, "header name must be a non-empty string")
    return value


def build_options(options: LoggerOptions | None = None, **overrides: Any) -> ResolvedLoggerOptions:
    """Merge *options* (and keyword *overrides*) with the defaults field by field.

    Raises:
        InvalidSettingValueError: unknown level or malformed header names.
    """
    opts = options or LoggerOptions()
    if overrides:
        opts = dataclasses.replace(opts, **overrides)

    ip_headers = _pick(opts.get_ip_from_headers, DEFAULT_IP_HEADERS)
    if isinstance(ip_headers, str):
        raise InvalidSettingValueError(
            "get_ip_from_headers", ip_headers, "expected a sequence of header names"
        )

    return ResolvedLoggerOptions(
        level=LogLevel.parse(_pick(opts.level, LogLevel.INFO)),
        log_with_request_id=_pick(opts.log_with_request_id, True),
        request_log_enable=_pick(opts.request_log_enable, True),
        request_id_header_name=_header_name(
            "request_id_header_name",
            _pick(opts.request_id_header_name, DEFAULT_REQUEST_ID_HEADER),
        ),
        response_time_header_name=_header_name(
            "response_time_header_name",
            _pick(opts.response_time_header_name, DEFAULT_RESPONSE_TIME_HEADER),
        ),
        generator=_pick(opts.generator, uuid_generator),
        get_ip_address=opts.get_ip_address,
        get_ip_from_headers=tuple(
            _header_name("get_ip_from_headers", name) for name in ip_headers
        ),
        stream=opts.stream,
        pretty_options=opts.pretty_options,
        complete_on_error=_pick(opts.complete_on_error, True),
    )


__all__ = [
    "DEFAULT_IP_HEADERS",
    "DEFAULT_REQUEST_ID_HEADER",
    "DEFAULT_RESPONSE_TIME_HEADER",
    "IpExtractor",
    "LoggerOptions",
    "RequestIdGenerator",
    "ResolvedLoggerOptions",
    "build_options",
    "uuid_generator",
]
