"""Root error class for the reqlog error hierarchy."""

from __future__ import annotations


class ReqlogError(Exception):
    """Root of every error reqlog raises.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        cause: Original exception that triggered this error.
    """

    default_code: str = "reqlog_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["ReqlogError"]
