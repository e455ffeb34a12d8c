"""Config settings – CacheSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import Any

from resource_cache.config.settings.base import Settings
from resource_cache.config.validation import InvalidSettingValueError
from resource_cache.kernel.errors import ValidationError
from resource_cache.kernel.resource import Freshness, parse_freshness
from resource_cache.observability.logging import configure_logging


@dataclasses.dataclass
class CacheSettings(Settings):
    """Tunables shared by every binding of one cache.

    default_freshness:
        Applied to requests that declare no freshness: seconds, or
        ``"forever"`` (fetch once, never refresh).
    retry_interval:
        Seconds a ``failure`` resource waits after its last attempt before
        it may be fetched again.
    fetch_timeout:
        Seconds after which an unanswered fetch stops blocking a new one for
        the same identifier.  ``None`` waits forever.
    log_level:
        Root logging level applied by :meth:`configure_logging` (and by
        ``ResourceCache.create(..., configure_logs=True)``).
    """

    _prefix = "resource_cache"

    default_freshness: Any = "forever"
    retry_interval: float = 5.0
    fetch_timeout: float | None = None
    log_level: str = "INFO"

    def _validate(self) -> None:
        try:
            self.default_freshness = parse_freshness(self.default_freshness)
        except ValidationError as exc:
            raise InvalidSettingValueError(
                "default_freshness", self.default_freshness, exc.message
            ) from exc
        if self.default_freshness is None:
            raise InvalidSettingValueError("default_freshness", None, "must be set")
        if self.retry_interval < 0:
            raise InvalidSettingValueError("retry_interval", self.retry_interval, "must be >= 0")
        if self.fetch_timeout is not None and self.fetch_timeout <= 0:
            raise InvalidSettingValueError("fetch_timeout", self.fetch_timeout, "must be > 0")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")
        self.log_level = self.log_level.upper()

    @property
    def freshness(self) -> Freshness:
        return self.default_freshness

    def configure_logging(self, *, json: bool = True) -> None:
        """Set up structlog and the root logger at ``log_level``."""
        configure_logging(self.log_level, json=json)


__all__ = ["CacheSettings"]
