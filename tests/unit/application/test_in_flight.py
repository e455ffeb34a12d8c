"""Unit tests for InFlightSet."""

from __future__ import annotations

from resource_cache.application.subscription import InFlightSet
from resource_cache.kernel.identity import Identifier
from resource_cache.testing.fakes import FakeClock

POSTS_1 = Identifier("posts", "1")
POSTS_2 = Identifier("posts", "2")


class TestInFlightSet:
    def test_first_acquire_wins(self) -> None:
        in_flight = InFlightSet(FakeClock())
        assert in_flight.try_acquire(POSTS_1) is True
        assert in_flight.try_acquire(POSTS_1) is False
        assert POSTS_1 in in_flight

    def test_structurally_equal_identifiers_collide(self) -> None:
        in_flight = InFlightSet(FakeClock())
        in_flight.try_acquire(POSTS_1)
        assert in_flight.try_acquire(Identifier("posts", "1")) is False

    def test_independent_identifiers(self) -> None:
        in_flight = InFlightSet(FakeClock())
        assert in_flight.try_acquire(POSTS_1)
        assert in_flight.try_acquire(POSTS_2)
        assert len(in_flight) == 2

    def test_release(self) -> None:
        in_flight = InFlightSet(FakeClock())
        in_flight.try_acquire(POSTS_1)
        in_flight.release(POSTS_1)
        in_flight.release(POSTS_1)
        assert in_flight.try_acquire(POSTS_1)

    def test_without_timeout_entries_never_expire(self) -> None:
        clock = FakeClock()
        in_flight = InFlightSet(clock)
        in_flight.try_acquire(POSTS_1)
        clock.advance(days=365)
        assert in_flight.try_acquire(POSTS_1) is False

    def test_timeout_frees_stuck_entries(self) -> None:
        clock = FakeClock()
        in_flight = InFlightSet(clock, timeout=30)
        in_flight.try_acquire(POSTS_1)
        clock.advance(seconds=29)
        assert in_flight.try_acquire(POSTS_1) is False
        clock.advance(seconds=1)
        assert in_flight.try_acquire(POSTS_1) is True
        clock.advance(seconds=10)
        assert in_flight.try_acquire(POSTS_1) is False

    def test_instances_are_independent(self) -> None:
        a, b = InFlightSet(FakeClock()), InFlightSet(FakeClock())
        a.try_acquire(POSTS_1)
        assert b.try_acquire(POSTS_1)

    def test_release_by_other_execution_keeps_entry(self) -> None:
        in_flight = InFlightSet(FakeClock())
        in_flight.try_acquire(POSTS_1, "fetch-1")
        in_flight.release(POSTS_1, "mutation-7")
        assert POSTS_1 in in_flight
        assert in_flight.owner(POSTS_1) == "fetch-1"
        in_flight.release(POSTS_1, "fetch-1")
        assert POSTS_1 not in in_flight

    def test_unowned_entry_released_by_any_execution(self) -> None:
        in_flight = InFlightSet(FakeClock())
        in_flight.try_acquire(POSTS_1)
        in_flight.release(POSTS_1, "whatever")
        assert POSTS_1 not in in_flight
