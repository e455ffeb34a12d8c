"""Application bus – EventBus port and an in-process implementation."""
from resource_cache.application.bus.local import LocalEventBus, Subscriber
from resource_cache.application.bus.port import EventBus, MessageHandler

__all__ = ["EventBus", "LocalEventBus", "MessageHandler", "Subscriber"]
