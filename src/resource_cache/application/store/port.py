"""Store port – asynchronous Identifier → Resource mapping."""
from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

from resource_cache.kernel.identity import Identifier
from resource_cache.kernel.resource import Resource

#: Called with the Identifier whose entry was just written.
ChangeListener = Callable[[Identifier], None]


@runtime_checkable
class Store(Protocol):
    """Port: the single source of truth for every cached Resource.

    Implementations store exactly what they are given: no staleness logic,
    no merge, last write wins.  ``get`` returns ``None`` for an entry that
    was never written; the read helpers turn that into ``UNINITIALIZED``.
    Both methods are coroutines so the backing medium may be slower than
    memory (a worker, a separate process, a remote cache).
    """

    async def get(self, identifier: Identifier) -> Resource | None: ...
    async def set(self, identifier: Identifier, resource: Resource) -> None: ...


@runtime_checkable
class ObservableStore(Store, Protocol):
    """A Store that can notify listeners after each write."""

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]: ...


__all__ = ["ChangeListener", "ObservableStore", "Store"]
