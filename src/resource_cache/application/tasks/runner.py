"""TaskRunner – executes a descriptor's initiator effects."""
from __future__ import annotations

import uuid

from resource_cache.application.bus.port import EventBus
from resource_cache.application.store import IdentifierLocks, Store, write_resource
from resource_cache.application.tasks.descriptor import TaskDescriptor
from resource_cache.application.tasks.effects import Update
from resource_cache.application.tasks.events import TaskRun
from resource_cache.application.tasks.journal import ExecutionJournal
from resource_cache.application.tasks.registry import TaskRegistry
from resource_cache.kernel.time import Clock
from resource_cache.observability.logging import get_logger

__all__ = ["TaskRunner", "new_execution_id"]


def new_execution_id() -> str:
    return uuid.uuid4().hex


class TaskRunner:
    """Starts one execution of a :class:`TaskDescriptor`.

    Order within :meth:`run`:

    1. the descriptor is registered so its lifecycle events can be read
       (only when it publishes an action);
    2. initiator updates are written optimistically, in order, and the data
       they replace is journaled for rollback;
    3. the descriptor's own entry moves to ``pending``;
    4. initiator actions are published, in order, wrapped in
       :class:`TaskRun`.

    Actions go out last so a transport answering synchronously never sees
    its outcome overwritten by step 3.
    """

    def __init__(
        self,
        store: Store,
        event_bus: EventBus,
        registry: TaskRegistry,
        journal: ExecutionJournal,
        clock: Clock,
        locks: IdentifierLocks | None = None,
    ) -> None:
        self._store = store
        self._bus = event_bus
        self._registry = registry
        self._journal = journal
        self._clock = clock
        self._locks = locks or IdentifierLocks()
        self._log = get_logger(__name__)

    async def run(
        self,
        descriptor: TaskDescriptor,
        *,
        mark_attempt: bool = True,
        execution_id: str | None = None,
    ) -> str:
        """Start *descriptor* and return the execution id.

        A descriptor whose initiator publishes no action is local-only: its
        updates are applied and the execution ends at once.  Nothing is
        registered, journaled or marked ``pending`` for it, since no
        lifecycle event will ever answer.
        """
        execution_id = execution_id or new_execution_id()
        log = self._log.bind(task_id=descriptor.id, execution_id=execution_id)
        actions = descriptor.actions
        if actions:
            self._registry.register(descriptor)

        for effect in descriptor.initiator:
            if isinstance(effect, Update):
                await self._write_optimistic(execution_id, effect)

        if not actions:
            self._journal.pop(execution_id)
            log.debug("task_runner.applied_locally")
            return execution_id

        if mark_attempt:
            now = self._clock.timestamp()
            async with self._locks(descriptor.id):
                await write_resource(self._store, descriptor.id, lambda r: r.attempt(now))

        log.debug("task_runner.started", actions=len(actions))
        for action in actions:
            await self._bus.publish(TaskRun(descriptor.id, execution_id, action.payload))
        return execution_id

    async def _write_optimistic(self, execution_id: str, update: Update) -> None:
        now = self._clock.timestamp()

        def transition(resource):
            self._journal.record(execution_id, update.target, resource)
            return resource.succeed(update.resolve(resource.data), now)

        async with self._locks(update.target):
            await write_resource(self._store, update.target, transition)
