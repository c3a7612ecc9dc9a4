"""Application entrypoint."""

from __future__ import annotations

import asyncio

import httpx
from sqlalchemy.exc import SQLAlchemyError

from hackerstories.config import get_settings
from hackerstories.db.kv_store import SqlKeyValueStore
from hackerstories.db.session import Database
from hackerstories.logging import configure_logging, logger
from hackerstories.services.controller import SearchController
from hackerstories.services.search import SearchService
from hackerstories.services.term_store import KeyValueStore, MemoryKeyValueStore, PersistentTermStore


async def _open_key_value_store(database: Database) -> KeyValueStore:
    try:
        await database.create_schema()
    except (SQLAlchemyError, OSError) as exc:
        logger.warning("term_store_unavailable", error=str(exc))
        return MemoryKeyValueStore()
    return SqlKeyValueStore(database)


async def main() -> None:
    configure_logging()
    settings = get_settings()

    database = Database(settings=settings)
    try:
        term_store = PersistentTermStore(
            await _open_key_value_store(database),
            key=settings.term.storage_key,
            default=settings.term.default_term,
        )

        async with httpx.AsyncClient() as client:
            search_service = SearchService(client, settings=settings.search_api)
            controller = SearchController(search_service.fetch, term_store, settings=settings)

            logger.info("app_starting", environment=settings.environment)
            state = await controller.start()

        for record in controller.sorted_results():
            logger.info(
                "story",
                id=record.id,
                title=record.title,
                url=record.url,
                author=record.author,
                num_comments=record.comment_count,
                points=record.score,
            )
        logger.info(
            "search_settled",
            term=controller.search_term,
            results=len(state.results),
            is_loading=state.is_loading,
            is_error=state.is_error,
            history=controller.history(),
        )
    finally:
        await database.dispose()


if __name__ == "__main__":
    asyncio.run(main())
