"""Key/value store backed by the ``stored_values`` table."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from hackerstories.db.models import StoredValue
from hackerstories.db.session import Database
from hackerstories.services.exceptions import TermStoreError
from hackerstories.utils.datetime import utc_now


class SqlKeyValueStore:
    def __init__(self, database: Database) -> None:
        self._database = database

    async def get(self, key: str) -> str | None:
        stmt = select(StoredValue.value).where(StoredValue.key == key)
        try:
            async with self._database.session() as session:
                result = await session.execute(stmt)
                return result.scalar_one_or_none()
        except (SQLAlchemyError, OSError) as exc:
            raise TermStoreError(f"Failed to read {key!r}: {exc}") from exc

    async def set(self, key: str, value: str) -> None:
        stmt = select(StoredValue).where(StoredValue.key == key)
        try:
            async with self._database.session() as session:
                result = await session.execute(stmt)
                row = result.scalar_one_or_none()
                if row is None:
                    session.add(StoredValue(key=key, value=value))
                else:
                    row.value = value
                    row.updated_at = utc_now()
                await session.commit()
        except (SQLAlchemyError, OSError) as exc:
            raise TermStoreError(f"Failed to write {key!r}: {exc}") from exc


__all__ = ["SqlKeyValueStore"]
