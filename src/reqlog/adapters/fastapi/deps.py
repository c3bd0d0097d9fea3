"""FastAPI adapter – accessors for what the request logger middleware exposes."""
from __future__ import annotations

from typing import Annotated

from starlette.requests import Request

from reqlog.kernel.errors import MiddlewareNotInstalledError
from reqlog.observability.logging import Logger


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'reqlog[fastapi]' to use the FastAPI adapter"
        ) from exc


_require_fastapi()

from fastapi import Depends  # noqa: E402


def get_request_log(request: Request) -> Logger:
    """Return the logger the middleware attached to *request*."""
    log = getattr(request.state, "log", None)
    if log is None:
        raise MiddlewareNotInstalledError("log")
    return log


def get_request_id(request: Request) -> str:
    """Return the correlation id the middleware generated for *request*."""
    request_id = getattr(request.state, "request_id", None)
    if request_id is None:
        raise MiddlewareNotInstalledError("request_id")
    return request_id


RequestLog = Annotated[Logger, Depends(get_request_log)]
RequestId = Annotated[str, Depends(get_request_id)]

__all__ = ["RequestId", "RequestLog", "get_request_id", "get_request_log"]
