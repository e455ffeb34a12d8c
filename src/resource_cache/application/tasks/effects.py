"""Effects – what a task initiator or handler asks the cache to do.

An effect is either an :class:`Update` of one Store entry or an
:class:`Action` forwarded verbatim to the application event bus.  Handlers
may return one effect, a list of them, or nothing; :func:`normalize_effects`
always produces a list.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Any, Callable, Union

from resource_cache.kernel.errors import EffectError
from resource_cache.kernel.identity import Identifier


@dataclasses.dataclass(frozen=True)
class Literal:
    """Replace the previous value with ``value``."""

    value: Any

    def __call__(self, previous: Any) -> Any:  # noqa: ARG002
        return self.value


@dataclasses.dataclass(frozen=True)
class Transform:
    """Compute the new value from the previous one."""

    fn: Callable[[Any], Any]

    def __call__(self, previous: Any) -> Any:
        return self.fn(previous)


@dataclasses.dataclass(frozen=True)
class Update:
    """Write to the Store entry at ``target``."""

    target: Identifier
    value: Literal | Transform

    @classmethod
    def set(cls, target: Identifier, value: Any) -> "Update":
        return cls(target, Literal(value))

    @classmethod
    def apply(cls, target: Identifier, fn: Callable[[Any], Any]) -> "Update":
        return cls(target, Transform(fn))

    @classmethod
    def of(cls, target: Identifier, value: Any) -> "Update":
        """Infer the variant: callables become a :class:`Transform`."""
        if isinstance(value, (Literal, Transform)):
            return cls(target, value)
        return cls.apply(target, value) if callable(value) else cls.set(target, value)

    def resolve(self, previous: Any) -> Any:
        return self.value(previous)


@dataclasses.dataclass(frozen=True)
class Action:
    """An application event to publish on the bus."""

    payload: Any


Effect = Union[Update, Action]


def _is_pair(value: Any) -> bool:
    return (
        isinstance(value, (tuple, list))
        and len(value) == 2
        and isinstance(value[0], Identifier)
    )


def _coerce(value: Any) -> Effect:
    if isinstance(value, (Update, Action)):
        return value
    if _is_pair(value):
        return Update.of(value[0], value[1])
    if isinstance(value, Mapping):
        return Action(value)
    raise EffectError(value)


def normalize_effects(result: Any) -> list[Effect]:
    """Turn a handler result into an ordered list of effects.

    Accepted shapes: ``None``; a single :class:`Update` / :class:`Action`;
    an ``(Identifier, value)`` pair; a mapping (an action payload); or an
    iterable of any of those.

    Raises:
        EffectError: for anything else.
    """
    if result is None:
        return []
    if isinstance(result, (Update, Action, Mapping)) or _is_pair(result):
        return [_coerce(result)]
    if isinstance(result, (str, bytes)) or not isinstance(result, Iterable):
        raise EffectError(result)
    return [_coerce(item) for item in result]


__all__ = [
    "Action",
    "Effect",
    "Literal",
    "Transform",
    "Update",
    "normalize_effects",
]
