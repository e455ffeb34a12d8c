"""Kernel resource – the immutable lifecycle state machine and staleness rule."""
from resource_cache.kernel.resource.freshness import FOREVER, Freshness, is_stale, parse_freshness
from resource_cache.kernel.resource.resource import (
    UNDEFINED,
    UNINITIALIZED,
    Progress,
    Resource,
    ResourceStatus,
)

__all__ = [
    "FOREVER",
    "Freshness",
    "Progress",
    "Resource",
    "ResourceStatus",
    "UNDEFINED",
    "UNINITIALIZED",
    "is_stale",
    "parse_freshness",
]
