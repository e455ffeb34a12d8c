"""Infrastructure errors – failures of the backing medium."""

from __future__ import annotations

from typing import Any

from resource_cache.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a cache rule violation."""

    default_code = "infrastructure_error"


class StoreError(InfrastructureError):
    """The Store's backing medium rejected a read or a write."""

    default_code = "store_error"

    def __init__(
        self,
        operation: str,
        identifier: Any,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        detail = {"operation": operation, "identifier": str(identifier), **(kwargs.pop("detail", None) or {})}
        super().__init__(
            message or f"Store {operation} failed for '{identifier}'", detail=detail, **kwargs
        )
        self.operation = operation
        self.identifier = identifier


__all__ = ["InfrastructureError", "StoreError"]
