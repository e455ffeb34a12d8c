"""Reconciler – applies task lifecycle events to the Store.

Each event names a registered :class:`TaskDescriptor` (``task_id``) and the
execution that produced it.  The descriptor's handlers turn the payload into
effects; updates are applied to the Store one after another, each against
the state left by the previous one, and actions are published on the bus.

Outcome rules:

* ``pending``  – progress counters at the event target (or the targets of
  ``on_partial``'s updates) while that entry is ``pending``.
* ``success``  – ``succeed(value)`` on each update target; a transform
  receives the entry's current ``data``.
* ``failure``  – optimistic writes of the execution are rolled back first,
  then ``fail(value)`` on each update target; a transform receives the
  entry's current ``error``.

A handler (or transform) that raises drives the descriptor's own entry to
``failure`` with a :class:`HandlerError`, which is then raised.
"""
from __future__ import annotations

from typing import Any, Callable, NoReturn

from resource_cache.application.bus.port import EventBus
from resource_cache.application.store import (
    IdentifierLocks,
    Store,
    read_resource,
    store_resource,
    write_resource,
)
from resource_cache.application.subscription.in_flight import InFlightSet
from resource_cache.application.tasks import (
    Action,
    Effect,
    ExecutionJournal,
    LifecycleEvent,
    TaskDescriptor,
    TaskRegistry,
    TaskState,
    Update,
)
from resource_cache.kernel.errors import HandlerError
from resource_cache.kernel.identity import Identifier
from resource_cache.kernel.resource import Progress, Resource, ResourceStatus
from resource_cache.kernel.time import Clock
from resource_cache.observability.logging import get_logger

__all__ = ["Reconciler"]


class Reconciler:
    def __init__(
        self,
        store: Store,
        registry: TaskRegistry,
        event_bus: EventBus,
        journal: ExecutionJournal,
        in_flight: InFlightSet,
        clock: Clock,
        locks: IdentifierLocks | None = None,
    ) -> None:
        self._store = store
        self._registry = registry
        self._bus = event_bus
        self._journal = journal
        self._in_flight = in_flight
        self._clock = clock
        self._locks = locks or IdentifierLocks()
        self._log = get_logger(__name__)

    async def handle(self, message: Any) -> bool:
        """Reconcile *message* if it is a lifecycle event; report whether it was."""
        if not isinstance(message, LifecycleEvent):
            return False
        await self.reconcile(message)
        return True

    async def reconcile(self, event: LifecycleEvent) -> None:
        """Apply one lifecycle event.

        Raises:
            UnknownTaskError: ``event.task_id`` was never registered.
            HandlerError: a handler or transform raised.
            StoreError: the Store rejected a read or write.
        """
        descriptor = self._registry.get(event.task_id)
        log = self._log.bind(task_id=event.task_id, execution_id=event.execution_id)
        log.debug("reconciler.event", state=event.state.value)

        if event.state is TaskState.PENDING:
            await self._reconcile_progress(descriptor, event)
            return

        try:
            if event.state is TaskState.SUCCESS:
                effects = descriptor.success_effects(event.payload)
            else:
                effects = descriptor.failure_effects(event.payload)
        except Exception as exc:
            await self._handler_failed(descriptor, event, exc)

        if event.state is TaskState.FAILURE:
            await self._roll_back(event.execution_id)
        else:
            self._journal.pop(event.execution_id)

        now = self._clock.timestamp()
        succeeded = event.state is TaskState.SUCCESS

        def transition(resource: Resource, update: Update) -> Resource:
            if succeeded:
                return resource.succeed(update.resolve(resource.data), now)
            return resource.fail(update.resolve(resource.error))

        try:
            await self._apply_all(descriptor, event, effects, transition)
        finally:
            self._finish(descriptor, event.execution_id)
        log.debug("reconciler.applied", state=event.state.value, effects=len(effects))

    # ------------------------------------------------------------------
    # Progress
    # ------------------------------------------------------------------

    async def _reconcile_progress(self, descriptor: TaskDescriptor, event: LifecycleEvent) -> None:
        if descriptor.on_partial is None:
            progress = Progress.coerce(event.payload)
            await self._write_progress(event.target, lambda _: progress)
            return

        try:
            effects = descriptor.partial_effects(event.payload)
        except Exception as exc:
            await self._handler_failed(descriptor, event, exc)

        for effect in effects:
            if isinstance(effect, Action):
                await self._bus.publish(effect.payload)
                continue
            try:
                await self._write_progress(
                    effect.target,
                    lambda r, u=effect: u.resolve(Progress(r.loaded, r.total)),
                )
            except _TransformError as exc:
                await self._handler_failed(descriptor, event, exc.__cause__ or exc)

    async def _write_progress(self, target: Identifier, value: Callable[[Resource], Any]) -> None:
        async with self._locks(target):
            current = await read_resource(self._store, target)
            if current.status is not ResourceStatus.PENDING:
                self._log.warning(
                    "reconciler.progress_ignored",
                    identifier=target,
                    status=current.status.value,
                )
                return
            try:
                progress = Progress.coerce(value(current))
            except Exception as exc:
                raise _TransformError() from exc
            await store_resource(self._store, target, current.update(progress))

    # ------------------------------------------------------------------
    # Terminal outcomes
    # ------------------------------------------------------------------

    async def _apply_all(
        self,
        descriptor: TaskDescriptor,
        event: LifecycleEvent,
        effects: list[Effect],
        transition: Callable[[Resource, Update], Resource],
    ) -> None:
        for effect in effects:
            if isinstance(effect, Action):
                await self._bus.publish(effect.payload)
                continue
            try:
                await self._apply_update(effect, transition)
            except _TransformError as exc:
                await self._handler_failed(descriptor, event, exc.__cause__ or exc)

    async def _apply_update(
        self,
        update: Update,
        transition: Callable[[Resource, Update], Resource],
    ) -> None:
        def guarded(resource: Resource) -> Resource:
            try:
                return transition(resource, update)
            except Exception as exc:
                raise _TransformError() from exc

        async with self._locks(update.target):
            await write_resource(self._store, update.target, guarded)

    async def _roll_back(self, execution_id: str | None) -> None:
        for identifier, snapshot in self._journal.pop(execution_id).items():
            self._log.debug("reconciler.rollback", identifier=identifier, execution_id=execution_id)
            async with self._locks(identifier):
                await write_resource(self._store, identifier, lambda r, s=snapshot: r.restore(s))

    async def _handler_failed(
        self,
        descriptor: TaskDescriptor,
        event: LifecycleEvent,
        exc: BaseException,
    ) -> NoReturn:
        error = HandlerError(descriptor.id, event.state.value, cause=exc)
        self._log.error(
            "reconciler.handler_failed",
            task_id=descriptor.id,
            execution_id=event.execution_id,
            state=event.state.value,
            exc_info=exc,
            **error.log_fields(),
        )
        try:
            await self._roll_back(event.execution_id)
            async with self._locks(descriptor.id):
                await write_resource(self._store, descriptor.id, lambda r: r.fail(error))
        finally:
            self._finish(descriptor, event.execution_id)
        raise error from exc

    def _finish(self, descriptor: TaskDescriptor, execution_id: str | None) -> None:
        self._in_flight.release(descriptor.id, execution_id)
        if descriptor.id.is_one_off:
            self._registry.discard(descriptor.id)


class _TransformError(Exception):
    """Internal marker: a user transform raised; the cause is chained."""
