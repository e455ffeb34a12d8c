"""Application tasks – descriptors, effects, lifecycle events and the runner."""
from resource_cache.application.tasks.descriptor import Handler, RefreshOptions, TaskDescriptor
from resource_cache.application.tasks.effects import (
    Action,
    Effect,
    Literal,
    Transform,
    Update,
    normalize_effects,
)
from resource_cache.application.tasks.events import LifecycleEvent, TaskRun, TaskState
from resource_cache.application.tasks.journal import ExecutionJournal
from resource_cache.application.tasks.registry import TaskRegistry
from resource_cache.application.tasks.runner import TaskRunner, new_execution_id

__all__ = [
    "Action",
    "Effect",
    "ExecutionJournal",
    "Handler",
    "LifecycleEvent",
    "Literal",
    "RefreshOptions",
    "TaskDescriptor",
    "TaskRegistry",
    "TaskRun",
    "TaskRunner",
    "TaskState",
    "Transform",
    "Update",
    "new_execution_id",
    "normalize_effects",
]
