"""
reqlog – request-lifecycle logging for ASGI applications.

Import path convention::

    from reqlog.adapters.fastapi import create_logger_middleware, RequestLog
    from reqlog.middleware import LoggerOptions, RequestLoggerSettings
    from reqlog.observability.logging import create_logger
    from reqlog.observability.timing import format_time
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
