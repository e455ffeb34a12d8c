"""Unit tests for the Store, its read boundary and identifier locks."""

from __future__ import annotations

import asyncio

import pytest

from resource_cache.application.store import (
    IdentifierLocks,
    InMemoryStore,
    ObservableStore,
    Store,
    read_resource,
    store_resource,
    write_resource,
)
from resource_cache.kernel.errors import StoreError
from resource_cache.kernel.identity import Identifier
from resource_cache.kernel.resource import UNINITIALIZED, ResourceStatus
from resource_cache.testing.fakes import FailingStore

POSTS_1 = Identifier("posts", "1")
POSTS_2 = Identifier("posts", "2")
NOW = 1_767_268_800.0


class TestInMemoryStore:
    def test_satisfies_ports(self) -> None:
        store = InMemoryStore()
        assert isinstance(store, Store)
        assert isinstance(store, ObservableStore)

    def test_get_missing_returns_none(self) -> None:
        assert asyncio.run(InMemoryStore().get(POSTS_1)) is None

    def test_set_and_get(self) -> None:
        store = InMemoryStore()
        resource = UNINITIALIZED.succeed("hello", NOW)
        asyncio.run(store.set(POSTS_1, resource))
        assert asyncio.run(store.get(POSTS_1)) is resource

    def test_last_write_wins(self) -> None:
        store = InMemoryStore()
        first = UNINITIALIZED.succeed(1, NOW)
        second = UNINITIALIZED.succeed(2, NOW)
        asyncio.run(store.set(POSTS_1, first))
        asyncio.run(store.set(POSTS_1, second))
        assert asyncio.run(store.get(POSTS_1)) is second

    def test_key_miss_within_known_category(self) -> None:
        store = InMemoryStore()
        asyncio.run(store.set(POSTS_1, UNINITIALIZED.succeed(1, NOW)))
        assert asyncio.run(store.get(POSTS_2)) is None

    def test_one_off_identifiers_are_stored(self) -> None:
        store = InMemoryStore()
        op = Identifier.one_off("save")
        asyncio.run(store.set(op, UNINITIALIZED.attempt(NOW)))
        assert asyncio.run(store.get(op)).status is ResourceStatus.PENDING

    def test_len_and_identifiers(self) -> None:
        store = InMemoryStore()
        asyncio.run(store.set(POSTS_1, UNINITIALIZED.attempt(NOW)))
        asyncio.run(store.set(Identifier("likes", "1"), UNINITIALIZED.attempt(NOW)))
        assert len(store) == 2
        assert set(store.identifiers()) == {POSTS_1, Identifier("likes", "1")}

    def test_subscribe_notifies_after_set(self) -> None:
        store = InMemoryStore()
        seen: list[Identifier] = []
        unsubscribe = store.subscribe(seen.append)
        asyncio.run(store.set(POSTS_1, UNINITIALIZED.attempt(NOW)))
        unsubscribe()
        asyncio.run(store.set(POSTS_2, UNINITIALIZED.attempt(NOW)))
        assert seen == [POSTS_1]

    def test_unsubscribe_twice_is_harmless(self) -> None:
        store = InMemoryStore()
        unsubscribe = store.subscribe(lambda _: None)
        unsubscribe()
        unsubscribe()


class TestReadBoundary:
    def test_category_miss_is_uninitialized(self) -> None:
        assert asyncio.run(read_resource(InMemoryStore(), POSTS_1)) is UNINITIALIZED

    def test_key_miss_is_uninitialized(self) -> None:
        store = InMemoryStore()
        asyncio.run(store.set(POSTS_1, UNINITIALIZED.attempt(NOW)))
        assert asyncio.run(read_resource(store, POSTS_2)) is UNINITIALIZED

    def test_store_never_holds_uninitialized_after_read(self) -> None:
        store = InMemoryStore()
        asyncio.run(read_resource(store, POSTS_1))
        assert len(store) == 0

    def test_write_applies_transition(self) -> None:
        store = InMemoryStore()
        updated = asyncio.run(write_resource(store, POSTS_1, lambda r: r.attempt(NOW)))
        assert updated.status is ResourceStatus.PENDING
        assert asyncio.run(store.get(POSTS_1)) is updated

    def test_read_failure_raises_store_error(self) -> None:
        store = FailingStore()
        store.failing_reads.add(POSTS_1)
        with pytest.raises(StoreError) as info:
            asyncio.run(read_resource(store, POSTS_1))
        assert info.value.operation == "get"
        assert isinstance(info.value.__cause__, OSError)

    def test_write_failure_raises_store_error(self) -> None:
        store = FailingStore()
        store.failing_writes.add(POSTS_1)
        with pytest.raises(StoreError) as info:
            asyncio.run(store_resource(store, POSTS_1, UNINITIALIZED.attempt(NOW)))
        assert info.value.operation == "set"


class TestIdentifierLocks:
    def test_same_identifier_same_lock(self) -> None:
        locks = IdentifierLocks()
        assert locks(POSTS_1) is locks(Identifier("posts", "1"))

    def test_different_identifiers_different_locks(self) -> None:
        locks = IdentifierLocks()
        assert locks(POSTS_1) is not locks(POSTS_2)

    def test_serialises_read_modify_write(self) -> None:
        store = InMemoryStore()
        locks = IdentifierLocks()

        async def increment() -> None:
            async with locks(POSTS_1):
                current = await read_resource(store, POSTS_1)
                await asyncio.sleep(0)
                value = current.data + 1 if current.has_data else 1
                await store.set(POSTS_1, current.succeed(value, NOW))

        async def run_all() -> int:
            await asyncio.gather(*(increment() for _ in range(5)))
            return (await read_resource(store, POSTS_1)).data

        assert asyncio.run(run_all()) == 5
