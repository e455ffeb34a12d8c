"""InMemoryStore – process-local Store grouped by category."""
from __future__ import annotations

from typing import Callable, Iterator

from resource_cache.application.store.port import ChangeListener
from resource_cache.kernel.identity import Identifier
from resource_cache.kernel.resource import Resource

__all__ = ["InMemoryStore"]


class InMemoryStore:
    """Two-level ``category -> key -> Resource`` mapping.

    Created empty; callers own its lifetime and there is nothing to tear
    down.  Listeners registered with :meth:`subscribe` run synchronously
    after every :meth:`set`, in registration order.
    """

    def __init__(self) -> None:
        self._collections: dict[str | None, dict[str, Resource]] = {}
        self._listeners: list[ChangeListener] = []

    async def get(self, identifier: Identifier) -> Resource | None:
        collection = self._collections.get(identifier.category)
        if collection is None:
            return None
        return collection.get(identifier.key)

    async def set(self, identifier: Identifier, resource: Resource) -> None:
        self._collections.setdefault(identifier.category, {})[identifier.key] = resource
        for listener in list(self._listeners):
            listener(identifier)

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def identifiers(self) -> Iterator[Identifier]:
        for category, collection in self._collections.items():
            for key in collection:
                yield Identifier(category, key)

    def __len__(self) -> int:
        return sum(len(c) for c in self._collections.values())
