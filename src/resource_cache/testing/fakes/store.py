"""Testing fakes – FailingStore."""
from __future__ import annotations

from resource_cache.application.store import InMemoryStore
from resource_cache.kernel.identity import Identifier
from resource_cache.kernel.resource import Resource


class FailingStore(InMemoryStore):
    """InMemoryStore whose reads/writes raise for chosen identifiers."""

    def __init__(self) -> None:
        super().__init__()
        self.failing_reads: set[Identifier] = set()
        self.failing_writes: set[Identifier] = set()

    async def get(self, identifier: Identifier) -> Resource | None:
        if identifier in self.failing_reads:
            raise OSError(f"read of {identifier} rejected")
        return await super().get(identifier)

    async def set(self, identifier: Identifier, resource: Resource) -> None:
        if identifier in self.failing_writes:
            raise OSError(f"write of {identifier} rejected")
        await super().set(identifier, resource)


__all__ = ["FailingStore"]
