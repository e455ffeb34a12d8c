"""Application-layer errors – task lookup and handler execution."""

from __future__ import annotations

from typing import Any

from resource_cache.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnknownTaskError(ApplicationError):
    """A lifecycle event names a task that was never registered."""

    default_code = "unknown_task"

    def __init__(self, task_id: Any, **kwargs: Any) -> None:
        super().__init__(f"No task registered for '{task_id}'", **kwargs)
        self.task_id = task_id


class HandlerError(ApplicationError):
    """A success/failure/partial handler raised while computing effects."""

    default_code = "handler_error"

    def __init__(
        self,
        task_id: Any,
        state: str,
        *,
        cause: BaseException,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"The {state} handler of task '{task_id}' raised {type(cause).__name__}",
            cause=cause,
            **kwargs,
        )
        self.task_id = task_id
        self.state = state


__all__ = ["ApplicationError", "HandlerError", "UnknownTaskError"]
