"""FastAPI adapter – request logger middleware and handler dependencies."""
from reqlog.adapters.fastapi.deps import RequestId, RequestLog, get_request_id, get_request_log
from reqlog.adapters.fastapi.middleware import (
    REQUEST_ID_FIELD,
    LoggerMiddleware,
    RequestLoggerMiddleware,
    create_logger_middleware,
    logger_middleware,
)

__all__ = [
    "REQUEST_ID_FIELD",
    "LoggerMiddleware",
    "RequestId",
    "RequestLog",
    "RequestLoggerMiddleware",
    "create_logger_middleware",
    "get_request_id",
    "get_request_log",
    "logger_middleware",
]
