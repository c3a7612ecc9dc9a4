"""Tests for the persisted search term and its key/value backends."""

from __future__ import annotations

import pytest
from sqlalchemy import UniqueConstraint, select
from sqlalchemy.exc import OperationalError

from hackerstories.db.kv_store import SqlKeyValueStore
from hackerstories.db.models import StoredValue
from hackerstories.services.exceptions import TermStoreError
from hackerstories.services.term_store import MemoryKeyValueStore, PersistentTermStore


class RecordingStore(MemoryKeyValueStore):
    def __init__(self, initial=None) -> None:
        super().__init__(initial)
        self.writes: list[tuple[str, str]] = []

    async def set(self, key: str, value: str) -> None:
        self.writes.append((key, value))
        await super().set(key, value)


class BrokenStore:
    async def get(self, key: str):
        raise TermStoreError("disk gone")

    async def set(self, key: str, value: str) -> None:
        raise TermStoreError("disk gone")


@pytest.mark.asyncio
async def test_load_falls_back_to_default_without_writing():
    backend = RecordingStore()
    store = PersistentTermStore(backend, key="search", default="React")

    assert await store.load() == "React"
    assert backend.writes == []


@pytest.mark.asyncio
async def test_load_returns_stored_value():
    store = PersistentTermStore(RecordingStore({"search": "Redux"}), key="search", default="React")

    assert await store.load() == "Redux"


@pytest.mark.asyncio
async def test_save_writes_only_changes():
    backend = RecordingStore({"search": "Redux"})
    store = PersistentTermStore(backend, key="search", default="React")
    await store.load()

    await store.save("Redux")
    await store.save("Vue")
    await store.save("Vue")

    assert backend.writes == [("search", "Vue")]
    assert backend.values["search"] == "Vue"


@pytest.mark.asyncio
async def test_store_failures_are_swallowed():
    store = PersistentTermStore(BrokenStore(), key="search", default="React")

    assert await store.load() == "React"
    await store.save("Vue")


@pytest.mark.asyncio
async def test_sql_store_inserts_then_updates(database, session):
    kv = SqlKeyValueStore(database)

    assert await kv.get("search") is None
    await kv.set("search", "React")
    await kv.set("search", "Redux")

    assert await kv.get("search") == "Redux"
    rows = (await session.execute(select(StoredValue))).scalars().all()
    assert [(row.key, row.value) for row in rows] == [("search", "Redux")]


@pytest.mark.asyncio
async def test_sql_store_backs_persistent_term(database):
    kv = SqlKeyValueStore(database)
    first = PersistentTermStore(kv, key="search", default="React")
    assert await first.load() == "React"
    await first.save("Python")

    second = PersistentTermStore(kv, key="search", default="React")
    assert await second.load() == "Python"


@pytest.mark.asyncio
async def test_sql_store_translates_database_errors():
    class FailingSession:
        async def execute(self, *args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("no such table"))

    class FailingDatabase:
        def session(self):
            class _Wrapper:
                async def __aenter__(self):
                    return FailingSession()

                async def __aexit__(self, exc_type, exc, tb):
                    return False

            return _Wrapper()

    kv = SqlKeyValueStore(FailingDatabase())  # type: ignore[arg-type]

    with pytest.raises(TermStoreError):
        await kv.get("search")
    with pytest.raises(TermStoreError):
        await kv.set("search", "React")


def test_stored_value_table_uses_naming_convention():
    table = StoredValue.__table__

    assert table.name == "stored_values"
    unique_names = {
        constraint.name
        for constraint in table.constraints
        if isinstance(constraint, UniqueConstraint)
    }
    assert unique_names == {"uq_stored_values_key"}
