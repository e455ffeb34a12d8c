"""TaskRegistry – task id → TaskDescriptor."""
from __future__ import annotations

from resource_cache.application.tasks.descriptor import TaskDescriptor
from resource_cache.kernel.errors import UnknownTaskError
from resource_cache.kernel.identity import Identifier

__all__ = ["TaskRegistry"]


class TaskRegistry:
    """Descriptors currently known to the reconciler, keyed by their ``id``.

    Registering again under the same id replaces the previous descriptor;
    the latest declaration decides how the next lifecycle event is read.
    """

    def __init__(self) -> None:
        self._descriptors: dict[Identifier, TaskDescriptor] = {}

    def register(self, descriptor: TaskDescriptor) -> None:
        self._descriptors[descriptor.id] = descriptor

    def get(self, task_id: Identifier) -> TaskDescriptor:
        try:
            return self._descriptors[task_id]
        except KeyError:
            raise UnknownTaskError(task_id) from None

    def discard(self, task_id: Identifier) -> None:
        self._descriptors.pop(task_id, None)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)
