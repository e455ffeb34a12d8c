"""Testing support – fakes and fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["resource_cache.testing.fixtures"]
"""

from resource_cache.testing.fakes import FailingStore, FakeClock, RecordingEventBus, RenderRecorder

__all__ = ["FailingStore", "FakeClock", "RecordingEventBus", "RenderRecorder"]
