"""Resource – immutable snapshot of one cache entry's fetch lifecycle.

Every transition returns a new :class:`Resource`; nothing is ever mutated in
place.  Consumers rely on this to detect changes by identity (``is``) alone.

State machine::

    uninitialized ──attempt──▶ pending ──succeed──▶ success
                                  │  ▲                 │
                              update │               attempt
                                  ▼  │                 ▼
                               pending ──fail──▶ failure ──attempt──▶ pending

``uninitialized`` is never stored: it is what a lookup miss resolves to.
"""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping
from enum import Enum
from typing import Any

from resource_cache.kernel.errors import InvalidTransitionError, ValidationError


class _Undefined:
    """Marker for "no payload received"; distinct from a ``None`` payload."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Undefined":
        return self

    def __deepcopy__(self, memo: Any) -> "_Undefined":
        return self


UNDEFINED: Any = _Undefined()


class ResourceStatus(str, Enum):
    UNINITIALIZED = "uninitialized"
    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclasses.dataclass(frozen=True)
class Progress:
    """Partial-progress counters reported while a fetch is pending."""

    loaded: int | None = None
    total: int | None = None

    @classmethod
    def coerce(cls, payload: Any) -> "Progress":
        """Build a :class:`Progress` from a Progress, mapping or object."""
        if isinstance(payload, Progress):
            return payload
        if isinstance(payload, Mapping):
            return cls(payload.get("loaded"), payload.get("total"))
        if hasattr(payload, "loaded") or hasattr(payload, "total"):
            return cls(getattr(payload, "loaded", None), getattr(payload, "total", None))
        raise ValidationError(f"Cannot read progress counters from {payload!r}")


@dataclasses.dataclass(frozen=True)
class Resource:
    """One entry's lifecycle state and payload.

    ``last_updated`` is the time of the last successful data update
    (``-inf`` if never); ``last_attempt`` the start of the last fetch
    attempt (``None`` if never).
    """

    status: ResourceStatus
    data: Any = UNDEFINED
    error: Any = UNDEFINED
    last_updated: float = -math.inf
    last_attempt: float | None = None
    loaded: int | None = None
    total: int | None = None

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def attempt(self, now: float) -> "Resource":
        return dataclasses.replace(
            self,
            status=ResourceStatus.PENDING,
            last_attempt=now,
            loaded=None,
            total=None,
        )

    def update(self, progress: Progress) -> "Resource":
        if self.status is not ResourceStatus.PENDING:
            raise InvalidTransitionError("update", self.status.value)
        return dataclasses.replace(self, loaded=progress.loaded, total=progress.total)

    def succeed(self, data: Any, now: float) -> "Resource":
        return Resource(
            status=ResourceStatus.SUCCESS,
            data=data,
            error=UNDEFINED,
            last_updated=now,
            last_attempt=now,
        )

    def fail(self, error: Any) -> "Resource":
        return dataclasses.replace(
            self,
            status=ResourceStatus.FAILURE,
            error=error,
            loaded=None,
            total=None,
        )

    def restore(self, snapshot: "Resource") -> "Resource":
        """Return a copy carrying *snapshot*'s data and ``last_updated``.

        Used to roll back optimistic writes; status, error and attempt time
        stay as they are.
        """
        return dataclasses.replace(self, data=snapshot.data, last_updated=snapshot.last_updated)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def has_data(self) -> bool:
        return self.data is not UNDEFINED

    @property
    def has_error(self) -> bool:
        return self.error is not UNDEFINED

    @property
    def is_terminal(self) -> bool:
        return self.status in (ResourceStatus.SUCCESS, ResourceStatus.FAILURE)

    def staleness(self, now: float) -> float:
        """Seconds since the last successful update (``inf`` if never)."""
        return now - self.last_updated

    def metadata(self) -> dict[str, Any]:
        """Every field except ``data``; what consumers see under ``data_requests``."""
        return {
            "status": self.status.value,
            "error": self.error,
            "last_updated": self.last_updated,
            "last_attempt": self.last_attempt,
            "loaded": self.loaded,
            "total": self.total,
        }


UNINITIALIZED = Resource(status=ResourceStatus.UNINITIALIZED)


__all__ = [
    "Progress",
    "Resource",
    "ResourceStatus",
    "UNDEFINED",
    "UNINITIALIZED",
]
