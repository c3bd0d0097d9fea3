"""Errors raised when request-scoped helpers are used without the middleware."""

from __future__ import annotations

from reqlog.kernel.errors.base import ReqlogError


class MiddlewareNotInstalledError(ReqlogError, RuntimeError):
    """A handler asked for request-scoped state no middleware has attached."""

    default_code = "middleware_not_installed"

    def __init__(self, attribute: str) -> None:
        super().__init__(
            f"request.state.{attribute} is not set; "
            "is RequestLoggerMiddleware installed on this app?"
        )
        self.attribute = attribute


__all__ = ["MiddlewareNotInstalledError"]
