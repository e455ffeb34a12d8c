"""Kernel time – Clock port + implementations."""
from resource_cache.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
