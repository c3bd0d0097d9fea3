"""Observability – RequestContext, CorrelationContext."""
from __future__ import annotations

import dataclasses
from contextvars import ContextVar, Token


@dataclasses.dataclass(frozen=True)
class RequestContext:
    """Per-request facts published by the request logger middleware."""
    request_id: str
    path: str = ""
    ip: str | None = None


_CTX_VAR: ContextVar[RequestContext | None] = ContextVar("_reqlog_request_ctx", default=None)


class CorrelationContext:
    """Ambient request context stored in a ``ContextVar``.

    Each asyncio task sees its own value, so concurrent requests never
    observe each other's context.
    """

    @staticmethod
    def set(ctx: RequestContext) -> Token[RequestContext | None]:
        return _CTX_VAR.set(ctx)

    @staticmethod
    def reset(token: Token[RequestContext | None]) -> None:
        _CTX_VAR.reset(token)

    @staticmethod
    def get() -> RequestContext | None:
        return _CTX_VAR.get()

    @staticmethod
    def require() -> RequestContext:
        ctx = _CTX_VAR.get()
        if ctx is None:
            raise RuntimeError("No RequestContext in current context")
        return ctx


__all__ = ["CorrelationContext", "RequestContext"]
