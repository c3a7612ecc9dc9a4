"""Persistence of the last search term across sessions."""

from __future__ import annotations

from typing import Protocol

from hackerstories.logging import logger
from hackerstories.services.exceptions import TermStoreError


class KeyValueStore(Protocol):
    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...


class MemoryKeyValueStore:
    """Process-local store, used when nothing needs to outlive the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self.values.get(key)

    async def set(self, key: str, value: str) -> None:
        self.values[key] = value


class PersistentTermStore:
    """Loads the stored term once and writes it back only when it changes.

    Store failures never reach the caller: a failed load falls back to the
    default and a failed save is logged and dropped.
    """

    __slots__ = ("_store", "_key", "_default", "_last_value")

    def __init__(self, store: KeyValueStore, key: str, default: str) -> None:
        self._store = store
        self._key = key
        self._default = default
        self._last_value: str | None = None

    async def load(self) -> str:
        try:
            value = await self._store.get(self._key)
        except TermStoreError as exc:
            logger.warning("term_store_load_failed", key=self._key, error=str(exc))
            value = None
        if value is None:
            value = self._default
        self._last_value = value
        return value

    async def save(self, value: str) -> None:
        if value == self._last_value:
            return
        try:
            await self._store.set(self._key, value)
        except TermStoreError as exc:
            logger.warning("term_store_save_failed", key=self._key, error=str(exc))
            return
        self._last_value = value


__all__ = ["KeyValueStore", "MemoryKeyValueStore", "PersistentTermStore"]
