"""Freshness tolerances and the staleness rule."""

from __future__ import annotations

import math
from typing import Any, Union

from resource_cache.kernel.errors import ValidationError
from resource_cache.kernel.resource.resource import Resource


class _Forever:
    """Freshness for historical / immutable data: one success is enough."""

    _instance: "_Forever | None" = None

    def __new__(cls) -> "_Forever":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "FOREVER"

    def __reduce__(self) -> str:
        return "FOREVER"


FOREVER: Any = _Forever()

#: Seconds of tolerated staleness, or ``FOREVER``.
Freshness = Union[float, _Forever]


def parse_freshness(value: Any) -> Freshness | None:
    """Normalise a user-supplied freshness.

    Accepts ``None`` (unset), ``FOREVER`` or the string ``"forever"``, and
    any non-negative number or numeric string (seconds).
    """
    if value is None or value is FOREVER:
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text == "forever":
            return FOREVER
        try:
            value = float(text)
        except ValueError:
            raise ValidationError(f"Unrecognised freshness {value!r}") from None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"Freshness must be a number of seconds or 'forever', got {value!r}")
    if math.isnan(value) or value < 0:
        raise ValidationError(f"Freshness must be non-negative, got {value!r}")
    return float(value)


def is_stale(resource: Resource, freshness: Freshness, now: float) -> bool:
    """Return True when *resource* must be re-fetched.

    ``FOREVER`` only asks for data that never arrived; a numeric tolerance
    compares the time since the last successful update.
    """
    if freshness is FOREVER:
        return resource.last_updated == -math.inf
    return not resource.staleness(now) < freshness


__all__ = ["FOREVER", "Freshness", "is_stale", "parse_freshness"]
