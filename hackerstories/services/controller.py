"""Composition root wiring user intents to the result set, history and sorting."""

from __future__ import annotations

from hackerstories.config import AppSettings, get_settings
from hackerstories.domain.models import ResultRecord, ResultSetState, SortKey, SortState
from hackerstories.domain.transitions import RemoveResult
from hackerstories.logging import logger
from hackerstories.services.fetch_lifecycle import Fetcher, FetchLifecycleController, ResultSetStore
from hackerstories.services.history import build_query_url, derive_history
from hackerstories.services.sorting import sort_results, toggle_sort
from hackerstories.services.term_store import PersistentTermStore


class SearchController:
    """Owns the current term, the issued query URLs and the sort selection.

    ``submit_search`` and ``replay_search`` await the fetch they trigger; callers
    that want to keep handling intents meanwhile can run them as tasks.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        term_store: PersistentTermStore,
        settings: AppSettings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._term_store = term_store
        self._store = ResultSetStore()
        self._lifecycle = FetchLifecycleController(
            self._store,
            fetcher,
            discard_stale_responses=self.settings.fetch.discard_stale_responses,
        )
        self._search_term = ""
        self._query_urls: list[str] = []
        self._sort_state = SortState()

    @property
    def state(self) -> ResultSetState:
        return self._store.state

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def query_urls(self) -> tuple[str, ...]:
        return tuple(self._query_urls)

    @property
    def sort_state(self) -> SortState:
        return self._sort_state

    async def start(self) -> ResultSetState:
        """Restore the last term and run the initial search for it."""

        self._search_term = await self._term_store.load()
        return await self.submit_search()

    async def change_search_input(self, term: str) -> None:
        self._search_term = term
        await self._term_store.save(term)

    async def submit_search(self, term: str | None = None) -> ResultSetState:
        if term is not None:
            await self.change_search_input(term)

        if not self._search_term.strip():
            logger.info("search_skipped_blank_term")
            return self.state

        url = build_query_url(self.settings.search_api.endpoint, self._search_term)
        self._query_urls.append(url)
        return await self._lifecycle.fetch(url)

    async def replay_search(self, term: str) -> ResultSetState:
        return await self.submit_search(term)

    def remove_result(self, record_id: str) -> ResultSetState:
        state = self._store.dispatch(RemoveResult(record_id=record_id))
        logger.info("result_removed", record_id=record_id, remaining=len(state.results))
        return state

    def select_sort(self, sort_key: SortKey) -> SortState:
        self._sort_state = toggle_sort(self._sort_state, sort_key)
        logger.info(
            "sort_selected",
            sort_key=self._sort_state.sort_key.value,
            is_reverse=self._sort_state.is_reverse,
        )
        return self._sort_state

    def history(self) -> list[str]:
        return derive_history(
            self._query_urls,
            endpoint=self.settings.search_api.endpoint,
            window=self.settings.history.window,
        )

    def sorted_results(self) -> list[ResultRecord]:
        return sort_results(
            self.state.results,
            self._sort_state.sort_key,
            self._sort_state.is_reverse,
        )


__all__ = ["SearchController"]
