"""TaskDescriptor – how to obtain or change one resource."""

from __future__ import annotations

import dataclasses
from typing import Any, Callable

from resource_cache.application.tasks.effects import Action, Effect, Update, normalize_effects
from resource_cache.kernel.errors import ValidationError
from resource_cache.kernel.identity import Identifier
from resource_cache.kernel.resource import Freshness, parse_freshness

#: A handler maps a lifecycle payload to zero or more effects.
Handler = Callable[[Any], Any]


@dataclasses.dataclass(frozen=True)
class RefreshOptions:
    """``freshness``: tolerated staleness in seconds, ``FOREVER``, or unset."""

    freshness: Freshness | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "freshness", parse_freshness(self.freshness))


@dataclasses.dataclass(frozen=True, eq=False)
class TaskDescriptor:
    """Declarative description of a fetch or mutation.

    ``initiator`` effects start the work: updates are written to the Store
    immediately (optimistically), actions are published for a transport to
    execute.  The transport reports back with lifecycle events that the
    :class:`~resource_cache.application.reconciler.Reconciler` interprets
    through ``on_success`` / ``on_failure`` / ``on_partial``.

    Without ``on_success`` / ``on_failure`` the raw payload replaces the
    entry at ``id``.

    Example::

        tags = TaskDescriptor(
            id=Identifier.of("reader-tags", "all"),
            initiator=[{"type": "HTTP_REQUEST", "method": "GET", "path": "/reader/tags"}],
            on_success=lambda data: Update.set(Identifier.of("reader-tags", "all"), data["tags"]),
        ).fresher_than(300)
    """

    id: Identifier
    initiator: Any = ()
    on_success: Handler | None = None
    on_failure: Handler | None = None
    on_partial: Handler | None = None
    options: RefreshOptions = dataclasses.field(default_factory=RefreshOptions)

    def __post_init__(self) -> None:
        if not isinstance(self.id, Identifier):
            raise ValidationError(f"TaskDescriptor id must be an Identifier, got {self.id!r}")
        object.__setattr__(self, "initiator", tuple(normalize_effects(self.initiator)))

    @property
    def freshness(self) -> Freshness | None:
        return self.options.freshness

    @property
    def actions(self) -> tuple[Action, ...]:
        return tuple(e for e in self.initiator if isinstance(e, Action))

    @property
    def is_local(self) -> bool:
        """True when no initiator action is published; nothing will answer."""
        return not self.actions

    def fresher_than(self, freshness: Any) -> "TaskDescriptor":
        return dataclasses.replace(
            self,
            options=dataclasses.replace(self.options, freshness=freshness),
        )

    def success_effects(self, payload: Any) -> list[Effect]:
        if self.on_success is None:
            return [Update.set(self.id, payload)]
        return normalize_effects(self.on_success(payload))

    def failure_effects(self, payload: Any) -> list[Effect]:
        if self.on_failure is None:
            return [Update.set(self.id, payload)]
        return normalize_effects(self.on_failure(payload))

    def partial_effects(self, payload: Any) -> list[Effect]:
        if self.on_partial is None:
            return []
        return normalize_effects(self.on_partial(payload))


__all__ = ["Handler", "RefreshOptions", "TaskDescriptor"]
