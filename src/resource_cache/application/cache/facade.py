"""ResourceCache – one explicitly owned cache instance and its collaborators."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from resource_cache.application.bus import EventBus, LocalEventBus
from resource_cache.application.reconciler import Reconciler
from resource_cache.application.store import IdentifierLocks, InMemoryStore, Store, read_resource
from resource_cache.application.subscription import (
    InFlightSet,
    Render,
    ResourcesFn,
    StateChanges,
    SubscriptionBinding,
)
from resource_cache.application.tasks import (
    ExecutionJournal,
    LifecycleEvent,
    TaskDescriptor,
    TaskRegistry,
    TaskRunner,
)
from resource_cache.config.settings import CacheSettings
from resource_cache.kernel.identity import Identifier
from resource_cache.kernel.resource import Resource
from resource_cache.kernel.time import Clock, SystemClock

__all__ = ["ResourceCache"]


@dataclasses.dataclass
class ResourceCache:
    """Wires store, runner, reconciler and in-flight set for one process.

    Nothing here is module-level state: create one instance at startup and
    pass it to whoever needs it.  There is nothing to tear down.

    Example::

        cache = ResourceCache.create()
        bus.attach(cache.reconciler)   # when bus is not the default LocalEventBus
        binding = await cache.bind(post_resources, render, props={"post_id": 7})
    """

    settings: CacheSettings
    store: Store
    event_bus: EventBus
    clock: Clock
    registry: TaskRegistry
    journal: ExecutionJournal
    in_flight: InFlightSet
    runner: TaskRunner
    reconciler: Reconciler

    @classmethod
    def create(
        cls,
        settings: CacheSettings | None = None,
        *,
        store: Store | None = None,
        event_bus: EventBus | None = None,
        clock: Clock | None = None,
        configure_logs: bool = False,
    ) -> "ResourceCache":
        settings = settings or CacheSettings()
        if configure_logs:
            settings.configure_logging()
        store = store if store is not None else InMemoryStore()
        bus = event_bus if event_bus is not None else LocalEventBus()
        clock = clock or SystemClock()
        locks = IdentifierLocks()
        registry = TaskRegistry()
        journal = ExecutionJournal()
        in_flight = InFlightSet(clock, timeout=settings.fetch_timeout)
        runner = TaskRunner(store, bus, registry, journal, clock, locks)
        reconciler = Reconciler(store, registry, bus, journal, in_flight, clock, locks)
        if isinstance(bus, LocalEventBus):
            bus.attach(reconciler)
        return cls(
            settings=settings,
            store=store,
            event_bus=bus,
            clock=clock,
            registry=registry,
            journal=journal,
            in_flight=in_flight,
            runner=runner,
            reconciler=reconciler,
        )

    async def bind(
        self,
        resources: ResourcesFn,
        render: Render,
        props: Mapping[str, Any] | None = None,
        *,
        state_changes: StateChanges | None = None,
    ) -> SubscriptionBinding:
        """Create a binding and run its first observation cycle."""
        binding = SubscriptionBinding(
            resources,
            store=self.store,
            runner=self.runner,
            event_bus=self.event_bus,
            render=render,
            in_flight=self.in_flight,
            clock=self.clock,
            settings=self.settings,
            props=props,
            state_changes=state_changes,
        )
        await binding.start()
        return binding

    async def run(self, descriptor: TaskDescriptor) -> str:
        return await self.runner.run(descriptor)

    async def reconcile(self, event: LifecycleEvent) -> None:
        await self.reconciler.reconcile(event)

    async def read(self, identifier: Identifier) -> Resource:
        return await read_resource(self.store, identifier)
