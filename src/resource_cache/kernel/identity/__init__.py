"""Kernel identity – cache entry identifiers."""
from resource_cache.kernel.identity.identifier import Identifier

__all__ = ["Identifier"]
