"""Identifier – composite (category, key) address of one cache entry."""

from __future__ import annotations

import dataclasses
import uuid

from resource_cache.kernel.errors import ValidationError


@dataclasses.dataclass(frozen=True)
class Identifier:
    """Structural key addressing a single cache entry.

    ``category`` groups entries of the same kind (``"post-likes"``,
    ``"reader-tags"``).  A ``None`` category marks a one-off operation
    slot: it still compares and hashes by value, but is never part of a
    typed collection.

    Example::

        likes = Identifier.of("post-likes", f"{site_id}:{post_id}")
        assert likes == Identifier("post-likes", f"{site_id}:{post_id}")
    """

    category: str | None
    key: str

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not self.key:
            raise ValidationError(f"Identifier key must be a non-empty string, got {self.key!r}")

    @classmethod
    def of(cls, category: str | None, key: object) -> "Identifier":
        return cls(category, str(key))

    @classmethod
    def one_off(cls, key: str | None = None) -> "Identifier":
        """Return an identifier for a unique operation (no category)."""
        return cls(None, key or uuid.uuid4().hex)

    @property
    def is_one_off(self) -> bool:
        return self.category is None

    def __str__(self) -> str:
        return f"{self.category if self.category is not None else '~'}:{self.key}"


__all__ = ["Identifier"]
