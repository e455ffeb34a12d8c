"""ResourceMap – what a consumer requests and which operations it performs."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Callable

from resource_cache.application.tasks import TaskDescriptor
from resource_cache.kernel.errors import ValidationError

#: Builds the descriptor of one mutation from the performer's call arguments.
PerformerFactory = Callable[..., TaskDescriptor]

#: ``(cache_key, factory)``: the callback is rebuilt only when the key changes.
Perform = tuple[Any, PerformerFactory]


@dataclasses.dataclass(frozen=True)
class ResourceMap:
    """Declarative request/perform maps for one binding.

    ``request`` maps a prop name to the descriptor whose resource should be
    passed under that name.  ``perform`` maps a prop name to a
    ``(cache_key, factory)`` pair; the binding passes a stable async
    callback under that name.
    """

    request: Mapping[str, TaskDescriptor] = dataclasses.field(default_factory=dict)
    perform: Mapping[str, Perform] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        overlap = set(self.request) & set(self.perform)
        if overlap:
            raise ValidationError(f"Keys both requested and performed: {sorted(overlap)}")
        for key, entry in self.perform.items():
            if not (isinstance(entry, tuple) and len(entry) == 2 and callable(entry[1])):
                raise ValidationError(f"Perform entry '{key}' must be a (cache_key, factory) pair")

    @classmethod
    def coerce(cls, value: "ResourceMap | Mapping[str, Any]") -> "ResourceMap":
        """Accept a ResourceMap or a ``{"request": ..., "perform": ...}`` mapping."""
        if isinstance(value, ResourceMap):
            return value
        return cls(
            request=dict(value.get("request") or {}),
            perform={k: tuple(v) for k, v in (value.get("perform") or {}).items()},
        )


#: ``resources(state, props)`` computes the map for the current global state.
ResourcesFn = Callable[[Any, Mapping[str, Any]], "ResourceMap | Mapping[str, Any]"]

__all__ = ["Perform", "PerformerFactory", "ResourceMap", "ResourcesFn"]
