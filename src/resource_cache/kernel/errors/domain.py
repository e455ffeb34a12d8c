"""Domain errors – state machine and value invariants."""

from __future__ import annotations

from typing import Any

from resource_cache.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a cache invariant is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """A value does not meet its construction rules."""

    default_code = "validation_error"


class InvalidTransitionError(DomainError):
    """A Resource transition was requested from a status that forbids it."""

    default_code = "invalid_transition"

    def __init__(self, operation: str, status: Any, **kwargs: Any) -> None:
        super().__init__(
            f"Cannot apply '{operation}' to a resource in status '{status}'",
            **kwargs,
        )
        self.operation = operation
        self.status = status


class EffectError(DomainError):
    """A handler returned something that is not an Effect."""

    default_code = "invalid_effect"

    def __init__(self, value: Any, **kwargs: Any) -> None:
        super().__init__(f"Cannot interpret {value!r} as an effect", **kwargs)
        self.value = value


__all__ = [
    "DomainError",
    "EffectError",
    "InvalidTransitionError",
    "ValidationError",
]
