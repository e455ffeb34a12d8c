"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   ├── InvalidTransitionError
    │   └── EffectError
    ├── ApplicationError     (application.py)
    │   ├── UnknownTaskError
    │   └── HandlerError
    └── InfrastructureError  (infrastructure.py)
        └── StoreError
"""

from resource_cache.kernel.errors.application import (
    ApplicationError,
    HandlerError,
    UnknownTaskError,
)
from resource_cache.kernel.errors.base import BaseError
from resource_cache.kernel.errors.domain import (
    DomainError,
    EffectError,
    InvalidTransitionError,
    ValidationError,
)
from resource_cache.kernel.errors.infrastructure import InfrastructureError, StoreError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "EffectError",
    "HandlerError",
    "InfrastructureError",
    "InvalidTransitionError",
    "StoreError",
    "UnknownTaskError",
    "ValidationError",
]
