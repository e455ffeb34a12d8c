"""ExecutionJournal – pre-optimistic snapshots, kept until an execution ends."""
from __future__ import annotations

from resource_cache.kernel.identity import Identifier
from resource_cache.kernel.resource import Resource

__all__ = ["ExecutionJournal"]


class ExecutionJournal:
    """Remembers, per execution, the Resource each optimistic write replaced.

    Only the first write to an Identifier within an execution is recorded,
    so a rollback returns to the state before the execution started.
    """

    def __init__(self) -> None:
        self._snapshots: dict[str, dict[Identifier, Resource]] = {}

    def record(self, execution_id: str, identifier: Identifier, resource: Resource) -> None:
        self._snapshots.setdefault(execution_id, {}).setdefault(identifier, resource)

    def pop(self, execution_id: str | None) -> dict[Identifier, Resource]:
        if execution_id is None:
            return {}
        return self._snapshots.pop(execution_id, {})

    def __contains__(self, execution_id: object) -> bool:
        return execution_id in self._snapshots

    def __len__(self) -> int:
        return len(self._snapshots)
