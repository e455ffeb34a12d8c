"""EventBus port – the application-wide action bus the cache talks to."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class EventBus(Protocol):
    """Port: publish application actions and read global state.

    The cache publishes initiator actions (wrapped in
    :class:`~resource_cache.application.tasks.events.TaskRun`) and the
    actions returned by task handlers.  ``get_state`` feeds the
    ``resources(state, props)`` function of every binding.
    """

    async def publish(self, action: Any) -> None: ...

    def get_state(self) -> Any: ...


@runtime_checkable
class MessageHandler(Protocol):
    """Anything that can claim a published message (returns True if handled)."""

    async def handle(self, message: Any) -> bool: ...


__all__ = ["EventBus", "MessageHandler"]
