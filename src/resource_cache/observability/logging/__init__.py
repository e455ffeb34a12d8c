"""Observability – structured logging helpers."""
from resource_cache.observability.logging.factory import JsonLoggerFactory, configure_logging
from resource_cache.observability.logging.processors import IdentifierRenderer, get_logger

__all__ = ["IdentifierRenderer", "JsonLoggerFactory", "configure_logging", "get_logger"]
