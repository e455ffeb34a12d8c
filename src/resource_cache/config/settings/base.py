"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass
class Settings:
    """Dataclass settings validated on construction.

    Subclasses name their environment namespace in ``_prefix`` and put
    cross-field checks in ``_validate``; every construction path (direct,
    :meth:`replace` or a loader) runs them.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Raise :class:`~resource_cache.config.validation.ConfigError` on bad values."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable holding *field_name* (``RESOURCE_CACHE_LOG_LEVEL``)."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def replace(self, **changes: Any) -> "Settings":
        """Validated copy with *changes* applied."""
        return dataclasses.replace(self, **changes)


__all__ = ["Settings"]
