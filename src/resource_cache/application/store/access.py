"""Read/write helpers – the boundary where a miss becomes ``UNINITIALIZED``."""
from __future__ import annotations

from typing import Callable

from resource_cache.application.store.port import Store
from resource_cache.kernel.errors import StoreError
from resource_cache.kernel.identity import Identifier
from resource_cache.kernel.resource import UNINITIALIZED, Resource

__all__ = ["read_resource", "store_resource", "write_resource"]


async def read_resource(store: Store, identifier: Identifier) -> Resource:
    """Return the stored Resource, or ``UNINITIALIZED`` on a miss.

    Raises:
        StoreError: the backing medium rejected the read.
    """
    try:
        resource = await store.get(identifier)
    except StoreError:
        raise
    except Exception as exc:
        raise StoreError("get", identifier, cause=exc) from exc
    return UNINITIALIZED if resource is None else resource


async def store_resource(store: Store, identifier: Identifier, resource: Resource) -> None:
    """Persist *resource*; backing-medium failures surface as :class:`StoreError`."""
    try:
        await store.set(identifier, resource)
    except StoreError:
        raise
    except Exception as exc:
        raise StoreError("set", identifier, cause=exc) from exc


async def write_resource(
    store: Store,
    identifier: Identifier,
    transition: Callable[[Resource], Resource],
) -> Resource:
    """Read *identifier*, apply *transition* and persist the result."""
    current = await read_resource(store, identifier)
    updated = transition(current)
    await store_resource(store, identifier, updated)
    return updated
