"""Lifecycle events – what a transport reports about a running task."""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any

from resource_cache.kernel.errors import ValidationError
from resource_cache.kernel.identity import Identifier


class TaskState(str, Enum):
    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"

    @classmethod
    def parse(cls, value: "TaskState | str") -> "TaskState":
        if isinstance(value, TaskState):
            return value
        if value == "partial":
            return cls.PENDING
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"Unknown task state {value!r}") from None

    @property
    def is_terminal(self) -> bool:
        return self is not TaskState.PENDING


@dataclasses.dataclass(frozen=True)
class LifecycleEvent:
    """Progress or outcome of one execution of a task.

    ``task_id`` names the registered TaskDescriptor; ``execution_id`` the
    run that produced the event (as returned by
    :meth:`~resource_cache.application.tasks.runner.TaskRunner.run`).
    Progress events must name the entry they update in ``target``.
    """

    task_id: Identifier
    execution_id: str | None
    state: TaskState
    payload: Any = None
    target: Identifier | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "state", TaskState.parse(self.state))
        if self.state is TaskState.PENDING and self.target is None:
            raise ValidationError(
                f"Progress event for task '{self.task_id}' must name a target identifier"
            )

    @classmethod
    def partial(
        cls,
        task_id: Identifier,
        execution_id: str | None,
        target: Identifier,
        progress: Any,
    ) -> "LifecycleEvent":
        return cls(task_id, execution_id, TaskState.PENDING, progress, target)

    @classmethod
    def succeeded(cls, task_id: Identifier, execution_id: str | None, payload: Any) -> "LifecycleEvent":
        return cls(task_id, execution_id, TaskState.SUCCESS, payload)

    @classmethod
    def failed(cls, task_id: Identifier, execution_id: str | None, error: Any) -> "LifecycleEvent":
        return cls(task_id, execution_id, TaskState.FAILURE, error)


@dataclasses.dataclass(frozen=True)
class TaskRun:
    """Envelope published for each initiator action.

    Transports answer with :class:`LifecycleEvent` instances carrying the
    same ``task_id`` and ``execution_id``.
    """

    task_id: Identifier
    execution_id: str
    action: Any


__all__ = ["LifecycleEvent", "TaskRun", "TaskState"]
