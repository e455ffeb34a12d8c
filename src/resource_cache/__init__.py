"""
resource_cache – client-side cache for asynchronously obtained data.

Import path convention::

    from resource_cache.kernel import Identifier, Resource
    from resource_cache.application.tasks import TaskDescriptor, Update
    from resource_cache.application import ResourceCache, ResourceMap
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
