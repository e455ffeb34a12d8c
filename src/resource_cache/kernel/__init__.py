"""Kernel – framework-agnostic building blocks: identifiers, resources, errors, time."""

from resource_cache.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    EffectError,
    HandlerError,
    InfrastructureError,
    InvalidTransitionError,
    StoreError,
    UnknownTaskError,
    ValidationError,
)
from resource_cache.kernel.identity import Identifier
from resource_cache.kernel.resource import (
    FOREVER,
    UNDEFINED,
    UNINITIALIZED,
    Progress,
    Resource,
    ResourceStatus,
    is_stale,
    parse_freshness,
)

__all__ = [
    "FOREVER",
    "ApplicationError",
    "BaseError",
    "DomainError",
    "EffectError",
    "HandlerError",
    "Identifier",
    "InfrastructureError",
    "InvalidTransitionError",
    "Progress",
    "Resource",
    "ResourceStatus",
    "StoreError",
    "UNDEFINED",
    "UNINITIALIZED",
    "UnknownTaskError",
    "ValidationError",
    "is_stale",
    "parse_freshness",
]
