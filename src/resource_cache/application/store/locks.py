"""IdentifierLocks – one asyncio.Lock per Store entry."""
from __future__ import annotations

import asyncio

from resource_cache.kernel.identity import Identifier

__all__ = ["IdentifierLocks"]


class IdentifierLocks:
    """Serialises read-modify-write cycles on the same Identifier.

    Shared by the runner and the reconciler so an optimistic write and a
    lifecycle event for the same entry never interleave between their read
    and their write.
    """

    def __init__(self) -> None:
        self._locks: dict[Identifier, asyncio.Lock] = {}

    def __call__(self, identifier: Identifier) -> asyncio.Lock:
        if identifier not in self._locks:
            self._locks[identifier] = asyncio.Lock()
        return self._locks[identifier]
