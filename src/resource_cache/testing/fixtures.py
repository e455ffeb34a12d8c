"""Testing fixtures – pytest plugin.

Register in ``conftest.py``::

    pytest_plugins = ["resource_cache.testing.fixtures"]
"""
from __future__ import annotations

import pytest

from resource_cache.application.cache import ResourceCache
from resource_cache.application.store import InMemoryStore
from resource_cache.config.settings import CacheSettings
from resource_cache.testing.fakes import FakeClock, RecordingEventBus, RenderRecorder


@pytest.fixture
def fake_clock():
    """FrozenClock pinned to 2026-01-01 12:00 UTC."""
    return FakeClock()


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def event_bus():
    return RecordingEventBus()


@pytest.fixture
def render():
    return RenderRecorder()


@pytest.fixture
def cache(store, event_bus, fake_clock):
    """A ResourceCache on fakes; the bus routes lifecycle events to it."""
    cache = ResourceCache.create(CacheSettings(), store=store, event_bus=event_bus, clock=fake_clock)
    event_bus.attach(cache.reconciler)
    return cache


__all__ = ["cache", "event_bus", "fake_clock", "render", "store"]
