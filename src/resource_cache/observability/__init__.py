"""Observability – structured logging."""
from resource_cache.observability.logging import (
    IdentifierRenderer,
    JsonLoggerFactory,
    configure_logging,
    get_logger,
)

__all__ = ["IdentifierRenderer", "JsonLoggerFactory", "configure_logging", "get_logger"]
