"""FastAPI adapter – request logger ASGI middleware.

Per HTTP request the middleware:

1. generates a correlation id and binds it into a child logger,
2. logs ``request incoming`` with the path and client address,
3. exposes a logger to handlers as ``request.state.log``,
4. runs the wrapped app and stamps the id and the elapsed time onto the
   response headers,
5. logs ``complete request`` with the status and response time.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, NamedTuple

from starlette.datastructures import MutableHeaders
from starlette.middleware import Middleware
from starlette.requests import Request

from reqlog.middleware.ip import resolve_ip
from reqlog.middleware.options import LoggerOptions, ResolvedLoggerOptions, build_options
from reqlog.observability.correlation import CorrelationContext, RequestContext
from reqlog.observability.logging import StructuredLogger, create_logger
from reqlog.observability.timing import format_time, hrtime

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Message, Receive, Scope, Send

    from reqlog.kernel.time import MonotonicClock

#: Structured field carrying the correlation id on scoped records.
REQUEST_ID_FIELD = "reqId"
#: ``scope["state"]`` keys, read by handlers as ``request.state.<key>``.
STATE_LOG_KEY = "log"
STATE_REQUEST_ID_KEY = "request_id"

_FALLBACK_STATUS = 500


class RequestLoggerMiddleware:
    """Correlation id, timing headers and start/finish records for every request.

    Parameters
    ----------
    app:
        The inner ASGI application.
    log:
        Root logger.  Built from *options* when omitted.
    options:
        :class:`LoggerOptions` or an already resolved configuration.
    clock:
        Monotonic clock used for the response time (tests pin it).
    """

    def __init__(
        self,
        app: "ASGIApp",
        *,
        log: StructuredLogger | None = None,
        options: LoggerOptions | ResolvedLoggerOptions | None = None,
        clock: "MonotonicClock | None" = None,
    ) -> None:
        self.app = app
        if isinstance(options, ResolvedLoggerOptions):
            self.options = options
        else:
            self.options = build_options(options)
        if log is None:
            log = create_logger(
                self.options.level, self.options.stream, self.options.pretty_options
            )
        self.log = log
        self._clock = clock

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        opts = self.options
        request = Request(scope)
        request_id = opts.generator(request)
        scoped = self.log.bind(**{REQUEST_ID_FIELD: request_id})

        path = scope.get("path", "")
        ip: str | None = None
        if opts.request_log_enable:
            ip = resolve_ip(request, opts)
            scoped.info("request incoming", path=path, ip=ip)

        state = scope.setdefault("state", {})
        state[STATE_LOG_KEY] = scoped if opts.log_with_request_id else self.log
        state[STATE_REQUEST_ID_KEY] = request_id
        token = CorrelationContext.set(RequestContext(request_id=request_id, path=path, ip=ip))

        start = hrtime(clock=self._clock)
        status_code: int | None = None
        resp_time: str | None = None

        async def send_with_headers(message: "Message") -> None:
            nonlocal status_code, resp_time
            if message["type"] == "http.response.start":
                status_code = message["status"]
                resp_time = format_time(hrtime(start, self._clock))
                message.setdefault("headers", [])
                headers = MutableHeaders(scope=message)
                headers[opts.request_id_header_name] = request_id
                headers[opts.response_time_header_name] = resp_time
            await send(message)

        def log_completion() -> None:
            elapsed = resp_time if resp_time is not None else format_time(hrtime(start, self._clock))
            scoped.info(
                "complete request",
                status=status_code if status_code is not None else _FALLBACK_STATUS,
                respTime=elapsed,
            )

        try:
            try:
                await self.app(scope, receive, send_with_headers)
            except BaseException as exc:
                if opts.request_log_enable and opts.complete_on_error:
                    # the downstream error wins over a failing sink
                    try:
                        log_completion()
                    except Exception as log_exc:
                        exc.add_note(f"reqlog: completion record not written: {log_exc!r}")
                raise
            if opts.request_log_enable:
                log_completion()
        finally:
            CorrelationContext.reset(token)


class LoggerMiddleware(NamedTuple):
    """Root logger plus the middleware entry that uses it."""

    log: StructuredLogger
    middleware: Middleware


def create_logger_middleware(
    options: LoggerOptions | None = None,
    *,
    clock: "MonotonicClock | None" = None,
    **overrides: Any,
) -> LoggerMiddleware:
    """Resolve *options*, build the root logger and wrap both in a ``Middleware``.

    Usage::

        bundle = create_logger_middleware(level="debug")
        app = FastAPI(middleware=[bundle.middleware])
        bundle.log.info("service started")
    """
    resolved = build_options(options, **overrides)
    log = create_logger(resolved.level, resolved.stream, resolved.pretty_options)
    middleware = Middleware(RequestLoggerMiddleware, log=log, options=resolved, clock=clock)
    return LoggerMiddleware(log=log, middleware=middleware)


def logger_middleware(
    options: LoggerOptions | None = None,
    *,
    clock: "MonotonicClock | None" = None,
    **overrides: Any,
) -> Middleware:
    """Like :func:`create_logger_middleware` but without the root logger handle."""
    return create_logger_middleware(options, clock=clock, **overrides).middleware


__all__ = [
    "REQUEST_ID_FIELD",
    "STATE_LOG_KEY",
    "STATE_REQUEST_ID_KEY",
    "LoggerMiddleware",
    "RequestLoggerMiddleware",
    "create_logger_middleware",
    "logger_middleware",
]
