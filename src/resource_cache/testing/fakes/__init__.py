"""Testing fakes – in-memory collaborators for unit tests."""
from resource_cache.testing.fakes.bus import RecordingEventBus
from resource_cache.testing.fakes.clock import FakeClock
from resource_cache.testing.fakes.render import RenderRecorder
from resource_cache.testing.fakes.store import FailingStore

__all__ = ["FailingStore", "FakeClock", "RecordingEventBus", "RenderRecorder"]
