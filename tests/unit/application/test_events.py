"""Unit tests for lifecycle events, TaskRegistry and ExecutionJournal."""

from __future__ import annotations

import pytest

from resource_cache.application.tasks import (
    ExecutionJournal,
    LifecycleEvent,
    TaskDescriptor,
    TaskRegistry,
    TaskState,
)
from resource_cache.kernel.errors import UnknownTaskError, ValidationError
from resource_cache.kernel.identity import Identifier
from resource_cache.kernel.resource import UNINITIALIZED

TASK = Identifier("posts", "1")


class TestTaskState:
    def test_partial_alias(self) -> None:
        assert TaskState.parse("partial") is TaskState.PENDING

    def test_parse_values(self) -> None:
        assert TaskState.parse("success") is TaskState.SUCCESS
        assert TaskState.parse(TaskState.FAILURE) is TaskState.FAILURE

    def test_unknown(self) -> None:
        with pytest.raises(ValidationError):
            TaskState.parse("cancelled")

    def test_terminal(self) -> None:
        assert TaskState.SUCCESS.is_terminal
        assert TaskState.FAILURE.is_terminal
        assert not TaskState.PENDING.is_terminal


class TestLifecycleEvent:
    def test_state_string_coerced(self) -> None:
        event = LifecycleEvent(TASK, "e1", "success", {"v": 1})  # type: ignore[arg-type]
        assert event.state is TaskState.SUCCESS

    def test_progress_requires_target(self) -> None:
        with pytest.raises(ValidationError):
            LifecycleEvent(TASK, "e1", TaskState.PENDING, {"loaded": 1})

    def test_partial_constructor(self) -> None:
        event = LifecycleEvent.partial(TASK, "e1", TASK, {"loaded": 1, "total": 2})
        assert event.state is TaskState.PENDING
        assert event.target == TASK

    def test_terminal_constructors(self) -> None:
        assert LifecycleEvent.succeeded(TASK, "e1", 1).state is TaskState.SUCCESS
        assert LifecycleEvent.failed(TASK, "e1", "x").state is TaskState.FAILURE


class TestTaskRegistry:
    def test_register_and_get(self) -> None:
        registry = TaskRegistry()
        descriptor = TaskDescriptor(id=TASK)
        registry.register(descriptor)
        assert registry.get(TASK) is descriptor
        assert TASK in registry

    def test_latest_registration_wins(self) -> None:
        registry = TaskRegistry()
        registry.register(TaskDescriptor(id=TASK))
        latest = TaskDescriptor(id=TASK).fresher_than(5)
        registry.register(latest)
        assert registry.get(TASK) is latest
        assert len(registry) == 1

    def test_unknown(self) -> None:
        with pytest.raises(UnknownTaskError):
            TaskRegistry().get(TASK)

    def test_discard(self) -> None:
        registry = TaskRegistry()
        registry.register(TaskDescriptor(id=TASK))
        registry.discard(TASK)
        registry.discard(TASK)
        assert TASK not in registry


class TestExecutionJournal:
    def test_first_snapshot_wins(self) -> None:
        journal = ExecutionJournal()
        first = UNINITIALIZED.succeed(1, 0.0)
        journal.record("e1", TASK, first)
        journal.record("e1", TASK, UNINITIALIZED.succeed(2, 0.0))
        assert journal.pop("e1") == {TASK: first}

    def test_pop_removes(self) -> None:
        journal = ExecutionJournal()
        journal.record("e1", TASK, UNINITIALIZED)
        journal.pop("e1")
        assert "e1" not in journal
        assert journal.pop("e1") == {}

    def test_pop_none(self) -> None:
        assert ExecutionJournal().pop(None) == {}
