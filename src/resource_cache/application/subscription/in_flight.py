"""InFlightSet – at most one outstanding fetch per Identifier."""
from __future__ import annotations

from typing import NamedTuple

from resource_cache.kernel.identity import Identifier
from resource_cache.kernel.time import Clock
from resource_cache.observability.logging import get_logger

__all__ = ["InFlightSet"]


class _Entry(NamedTuple):
    started: float
    owner: str | None


class InFlightSet:
    """Shared fetch coordinator.

    Every binding that may dispatch a fetch for an Identifier must go
    through the same instance.  :meth:`try_acquire` checks and inserts
    without awaiting in between, so two bindings on one event loop cannot
    both win.  The reconciler releases the entry when a terminal lifecycle
    event for the task is applied.

    An entry may name the execution that owns it.  Releasing with a
    different execution id leaves it in place, so a mutation sharing the
    fetch's Identifier cannot free the slot of a fetch still outstanding.

    With ``timeout`` set, an entry older than ``timeout`` seconds stops
    blocking new fetches.  The older fetch is not cancelled; whichever
    response arrives last wins.
    """

    def __init__(self, clock: Clock, timeout: float | None = None) -> None:
        self._clock = clock
        self._timeout = timeout
        self._entries: dict[Identifier, _Entry] = {}
        self._log = get_logger(__name__)

    def try_acquire(self, identifier: Identifier, owner: str | None = None) -> bool:
        now = self._clock.timestamp()
        entry = self._entries.get(identifier)
        if entry is not None:
            if self._timeout is None or now - entry.started < self._timeout:
                return False
            self._log.warning(
                "in_flight.expired",
                identifier=identifier,
                age=now - entry.started,
                timeout=self._timeout,
            )
        self._entries[identifier] = _Entry(now, owner)
        return True

    def release(self, identifier: Identifier, owner: str | None = None) -> None:
        """Free *identifier*; with *owner*, only if that execution holds it."""
        entry = self._entries.get(identifier)
        if entry is None:
            return
        if owner is not None and entry.owner is not None and entry.owner != owner:
            self._log.debug(
                "in_flight.release_skipped",
                identifier=identifier,
                owner=entry.owner,
                execution_id=owner,
            )
            return
        del self._entries[identifier]

    def owner(self, identifier: Identifier) -> str | None:
        entry = self._entries.get(identifier)
        return entry.owner if entry is not None else None

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._entries

    def __len__(self) -> int:
        return len(self._entries)
