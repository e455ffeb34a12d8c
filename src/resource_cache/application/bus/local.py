"""LocalEventBus – in-process EventBus with an attached reconciler."""
from __future__ import annotations

from typing import Any, Awaitable, Callable

from resource_cache.application.bus.port import MessageHandler
from resource_cache.observability.logging import get_logger

#: Async subscriber receiving every action not claimed by the reconciler.
Subscriber = Callable[[Any], Awaitable[None]]

__all__ = ["LocalEventBus", "Subscriber"]


class LocalEventBus:
    """Single-process bus: ordered subscribers plus a mutable state mapping.

    A message is first offered to the attached reconciler (middleware
    style); messages it does not claim go to every subscriber in
    registration order.  State listeners run after :meth:`set_state`.
    """

    def __init__(self, state: dict[str, Any] | None = None) -> None:
        self._state: dict[str, Any] = dict(state or {})
        self._subscribers: list[Subscriber] = []
        self._state_listeners: list[Callable[[], None]] = []
        self._reconciler: MessageHandler | None = None
        self._log = get_logger(__name__)

    def attach(self, reconciler: MessageHandler) -> None:
        self._reconciler = reconciler

    def register(self, subscriber: Subscriber) -> None:
        self._subscribers.append(subscriber)

    async def publish(self, action: Any) -> None:
        if self._reconciler is not None and await self._reconciler.handle(action):
            return
        self._log.debug("event_bus.published", action_type=type(action).__name__)
        for subscriber in list(self._subscribers):
            await subscriber(action)

    def get_state(self) -> dict[str, Any]:
        return self._state

    def set_state(self, **changes: Any) -> None:
        self._state = {**self._state, **changes}
        for listener in list(self._state_listeners):
            listener()

    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        """Register *listener* for state changes; returns an unsubscribe callable."""
        self._state_listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._state_listeners:
                self._state_listeners.remove(listener)

        return unsubscribe
