"""Application cache – the ResourceCache facade."""
from resource_cache.application.cache.facade import ResourceCache

__all__ = ["ResourceCache"]
