"""Application store – the Resource source of truth and its read boundary."""
from resource_cache.application.store.access import read_resource, store_resource, write_resource
from resource_cache.application.store.locks import IdentifierLocks
from resource_cache.application.store.memory import InMemoryStore
from resource_cache.application.store.port import ChangeListener, ObservableStore, Store

__all__ = [
    "ChangeListener",
    "IdentifierLocks",
    "InMemoryStore",
    "ObservableStore",
    "Store",
    "read_resource",
    "store_resource",
    "write_resource",
]
