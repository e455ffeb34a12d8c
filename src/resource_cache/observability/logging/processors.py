"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class IdentifierRenderer:
    """structlog processor that renders Identifier-valued fields as strings.

    Keeps JSON output readable (``post-likes:3:17``) instead of a dataclass
    repr.  Any value exposing ``category`` and ``key`` is rendered.
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        for name, value in event_dict.items():
            if hasattr(value, "category") and hasattr(value, "key"):
                event_dict[name] = str(value)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["IdentifierRenderer", "get_logger"]
