"""BaseError – root of every error the cache raises."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the resource-cache error hierarchy.

    Errors describe a cache rule or a collaborator failure, never a failed
    fetch: those are data (``failure`` resources).

    Args:
        message: Human-readable description.
        code: Machine-readable slug; subclasses set ``default_code``.
        detail: Extra context such as the operation and Identifier
            involved.  Values must be JSON-friendly once passed through
            ``str``.
        cause: Exception this error wraps; also set as ``__cause__``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return payload

    def log_fields(self) -> dict[str, Any]:
        """Flat key/values to splice into a structlog event.

        ``detail`` keys come first so ``error_code`` and ``error`` always
        describe this error.
        """
        return {**self.detail, "error_code": self.code, "error": self.message}


__all__ = ["BaseError"]
