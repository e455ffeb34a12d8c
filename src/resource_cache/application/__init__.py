"""Application – store, tasks, reconciliation and subscription bindings."""

from resource_cache.application.bus import EventBus, LocalEventBus
from resource_cache.application.cache import ResourceCache
from resource_cache.application.reconciler import Reconciler
from resource_cache.application.store import InMemoryStore, Store, read_resource, write_resource
from resource_cache.application.subscription import InFlightSet, ResourceMap, SubscriptionBinding
from resource_cache.application.tasks import (
    Action,
    LifecycleEvent,
    RefreshOptions,
    TaskDescriptor,
    TaskRun,
    TaskRunner,
    TaskState,
    Update,
)

__all__ = [
    "Action",
    "EventBus",
    "InFlightSet",
    "InMemoryStore",
    "LifecycleEvent",
    "LocalEventBus",
    "Reconciler",
    "RefreshOptions",
    "ResourceCache",
    "ResourceMap",
    "Store",
    "SubscriptionBinding",
    "TaskDescriptor",
    "TaskRun",
    "TaskRunner",
    "TaskState",
    "Update",
    "read_resource",
    "write_resource",
]
