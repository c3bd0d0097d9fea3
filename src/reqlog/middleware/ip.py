"""Client address resolution."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from starlette.requests import Request

    from reqlog.middleware.options import ResolvedLoggerOptions

UNKNOWN_IP = "unknown"


def resolve_ip(request: Request, options: ResolvedLoggerOptions) -> str:
    """Return the caller's address for *request*.

    A configured ``get_ip_address`` wins outright.  Otherwise the headers in
    ``get_ip_from_headers`` are probed in order; for the first one present a
    comma separated list is cut at its first comma.  With nothing found the
    result is ``"unknown"``.
    """
    if options.get_ip_address is not None:
        return options.get_ip_address(request)

    for header_name in options.get_ip_from_headers:
        value = request.headers.get(header_name)
        if value is not None:
            return value.split(",", 1)[0] if value.find(",") > 0 else value
    return UNKNOWN_IP


__all__ = ["UNKNOWN_IP", "resolve_ip"]
