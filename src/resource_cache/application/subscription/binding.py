"""SubscriptionBinding – recompute a consumer's resources on every state change.

One observation cycle (:meth:`SubscriptionBinding.refresh`):

1. read every requested resource (a miss reads as ``UNINITIALIZED``);
2. keep only the keys whose Resource is a different object than the one
   observed last cycle;
3. reuse performer callbacks whose cache key did not change, rebuild the
   others;
4. dispatch fetches for stale requests, at most one in flight per
   Identifier across every binding sharing the same :class:`InFlightSet`;
5. render, if anything changed.

Cycles are serialised per binding; change notifications arriving while a
cycle runs coalesce into one follow-up cycle.
"""
from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any, Awaitable, Callable

from resource_cache.application.bus.port import EventBus
from resource_cache.application.store import ObservableStore, Store, read_resource
from resource_cache.application.subscription.in_flight import InFlightSet
from resource_cache.application.subscription.resource_map import (
    PerformerFactory,
    ResourceMap,
    ResourcesFn,
)
from resource_cache.application.tasks import TaskDescriptor, TaskRunner, new_execution_id
from resource_cache.config.settings import CacheSettings
from resource_cache.kernel.errors import BaseError, StoreError
from resource_cache.kernel.resource import UNINITIALIZED, Resource, ResourceStatus, is_stale
from resource_cache.kernel.time import Clock
from resource_cache.observability.logging import get_logger

#: The render collaborator: called with the full props mapping.
Render = Callable[[dict[str, Any]], Any]

#: ``subscribe(callback) -> unsubscribe``.
StateChanges = Callable[[Callable[..., None]], Callable[[], None]]

#: Performer callbacks resolve to the execution id of the started task.
Performer = Callable[..., Awaitable[str]]

__all__ = ["Performer", "Render", "StateChanges", "SubscriptionBinding"]

_MISSING = object()


class SubscriptionBinding:
    def __init__(
        self,
        resources: ResourcesFn,
        *,
        store: Store,
        runner: TaskRunner,
        event_bus: EventBus,
        render: Render,
        in_flight: InFlightSet,
        clock: Clock,
        settings: CacheSettings | None = None,
        props: Mapping[str, Any] | None = None,
        state_changes: StateChanges | None = None,
    ) -> None:
        self._resources = resources
        self._store = store
        self._runner = runner
        self._bus = event_bus
        self._render = render
        self._in_flight = in_flight
        self._clock = clock
        self._settings = settings or CacheSettings()
        self._props: dict[str, Any] = dict(props or {})
        if state_changes is None and isinstance(store, ObservableStore):
            state_changes = store.subscribe
        self._state_changes = state_changes

        self._observed: dict[str, Resource] = {}
        self._performer_keys: dict[str, Any] = {}
        self._performers: dict[str, Performer] = {}
        self._cycle_lock = asyncio.Lock()
        self._queued = False
        self._tasks: set[asyncio.Task[Any]] = set()
        self._unsubscribe: Callable[[], None] | None = None
        self._log = get_logger(__name__)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self) -> dict[str, Any]:
        """Follow state changes, then run the first cycle.

        Subscribing first means writes made during the first cycle (the
        fetch it dispatches, or a transport that answers synchronously)
        queue a follow-up cycle instead of being missed.
        """
        if self._state_changes is not None and self._unsubscribe is None:
            self._unsubscribe = self._state_changes(self._on_change)
        return await self.refresh()

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    async def wait_idle(self) -> None:
        """Wait for every cycle scheduled by change notifications.

        Re-raises the first failure of those cycles (each is also logged as
        ``binding.cycle_failed``).
        """
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def update_props(self, props: Mapping[str, Any]) -> dict[str, Any]:
        self._props = dict(props)
        return await self.refresh()

    @property
    def props(self) -> dict[str, Any]:
        """The props the render collaborator receives."""
        merged = dict(self._props)
        merged.update({key: resource.data for key, resource in self._observed.items()})
        merged.update(self._performers)
        merged["data_requests"] = {
            key: resource.metadata() for key, resource in self._observed.items()
        }
        return merged

    @property
    def observed(self) -> dict[str, Resource]:
        return dict(self._observed)

    # ------------------------------------------------------------------
    # Observation cycle
    # ------------------------------------------------------------------

    async def refresh(self) -> dict[str, Any]:
        """Run one observation cycle and return what changed."""
        async with self._cycle_lock:
            self._queued = False
            return await self._cycle()

    async def _cycle(self) -> dict[str, Any]:
        resource_map = ResourceMap.coerce(self._resources(self._bus.get_state(), self._props))
        changes: dict[str, Any] = {}
        unreadable: set[str] = set()

        for key, descriptor in resource_map.request.items():
            try:
                resource = await read_resource(self._store, descriptor.id)
            except StoreError as exc:
                self._log.warning("binding.read_failed", key=key, **exc.log_fields())
                resource = UNINITIALIZED
                unreadable.add(key)
            if self._observed.get(key) is not resource:
                self._observed[key] = resource
                changes[key] = resource

        for key in set(self._observed) - set(resource_map.request):
            del self._observed[key]

        for key, (cache_key, factory) in resource_map.perform.items():
            previous = self._performer_keys.get(key, _MISSING)
            if previous is _MISSING or previous != cache_key:
                self._performer_keys[key] = cache_key
                self._performers[key] = self._build_performer(factory)
                changes[key] = self._performers[key]

        for key in set(self._performers) - set(resource_map.perform):
            del self._performers[key]
            del self._performer_keys[key]

        try:
            await self._schedule_fetches(
                {k: d for k, d in resource_map.request.items() if k not in unreadable}
            )
        finally:
            # Reads are already committed to _observed; render them even
            # when a fetch fails to start.
            if changes:
                self._log.debug("binding.changed", keys=sorted(changes))
                self._render(self.props)
        return changes

    def _build_performer(self, factory: PerformerFactory) -> Performer:
        async def perform(*args: Any, **kwargs: Any) -> str:
            descriptor = factory(*args, **kwargs)
            return await self._runner.run(descriptor)

        return perform

    async def _schedule_fetches(self, requests: Mapping[str, TaskDescriptor]) -> None:
        now = self._clock.timestamp()
        for key, descriptor in requests.items():
            resource = self._observed[key]
            freshness = descriptor.freshness
            if freshness is None:
                freshness = self._settings.freshness
            if not is_stale(resource, freshness, now):
                continue
            if self._backing_off(resource, now):
                continue
            execution_id = new_execution_id()
            if not self._in_flight.try_acquire(descriptor.id, execution_id):
                self._log.debug("binding.fetch_deduplicated", key=key, identifier=descriptor.id)
                continue
            self._log.debug(
                "binding.fetch_scheduled", key=key, identifier=descriptor.id, execution_id=execution_id
            )
            try:
                await self._runner.run(descriptor, execution_id=execution_id)
            except Exception:
                self._in_flight.release(descriptor.id, execution_id)
                raise
            if descriptor.is_local:
                self._in_flight.release(descriptor.id, execution_id)

    def _backing_off(self, resource: Resource, now: float) -> bool:
        return (
            resource.status is ResourceStatus.FAILURE
            and resource.last_attempt is not None
            and now - resource.last_attempt < self._settings.retry_interval
        )

    # ------------------------------------------------------------------
    # Change notifications
    # ------------------------------------------------------------------

    def _on_change(self, *_: Any) -> None:
        if self._queued:
            return
        self._queued = True
        task = asyncio.get_running_loop().create_task(self.refresh())
        self._tasks.add(task)
        task.add_done_callback(self._cycle_done)

    def _cycle_done(self, task: asyncio.Task[Any]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            fields = exc.log_fields() if isinstance(exc, BaseError) else {"error": repr(exc)}
            self._log.error("binding.cycle_failed", exc_info=exc, **fields)
