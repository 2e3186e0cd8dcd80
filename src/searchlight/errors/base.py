"""Errors – SearchlightError, the root of the error hierarchy."""

from __future__ import annotations

from typing import Any


class SearchlightError(Exception):
    """Root of the error hierarchy.

    Chain an underlying exception with ``raise ... from exc``.

    Args:
        message: Human-readable description, returned unchanged by ``str()``.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Structured context, e.g. the offending option name.
    """

    default_code: str = "searchlight_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Code, message and detail as a plain dict, for log events."""
        return {"code": self.code, "message": self.message, "detail": self.detail}


__all__ = ["SearchlightError"]
