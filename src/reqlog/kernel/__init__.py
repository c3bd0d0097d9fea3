"""Kernel – framework-agnostic building blocks."""

from reqlog.kernel.errors import MiddlewareNotInstalledError, ReqlogError

__all__ = ["MiddlewareNotInstalledError", "ReqlogError"]
