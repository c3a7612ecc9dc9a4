"""Fetch lifecycle: one remote request per trigger, settled into the result set."""

from __future__ import annotations

from typing import Awaitable, Callable, Sequence

from hackerstories.domain.models import ResultRecord, ResultSetState
from hackerstories.domain.transitions import (
    FetchFailure,
    FetchInit,
    FetchSuccess,
    ResultSetTransition,
    reduce_result_set,
)
from hackerstories.logging import logger
from hackerstories.services.exceptions import FetchFailed

Fetcher = Callable[[str], Awaitable[Sequence[ResultRecord]]]


class ResultSetStore:
    """Holds the current result set state; changed only through transitions."""

    def __init__(self, initial: ResultSetState | None = None) -> None:
        self._state = initial or ResultSetState()

    @property
    def state(self) -> ResultSetState:
        return self._state

    def dispatch(self, transition: ResultSetTransition) -> ResultSetState:
        self._state = reduce_result_set(self._state, transition)
        return self._state


class FetchLifecycleController:
    """Runs a fetch and converts its outcome into SUCCESS or FAILURE.

    Every call gets a generation number. With ``discard_stale_responses`` set,
    a request that settles after a newer one was started leaves the state alone.
    """

    def __init__(
        self,
        store: ResultSetStore,
        fetcher: Fetcher,
        *,
        discard_stale_responses: bool = True,
    ) -> None:
        self._store = store
        self._fetcher = fetcher
        self._discard_stale = discard_stale_responses
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    async def fetch(self, url: str) -> ResultSetState:
        self._generation += 1
        generation = self._generation
        self._store.dispatch(FetchInit())
        logger.info("search_fetch_started", url=url, generation=generation)

        try:
            hits = await self._fetcher(url)
        except FetchFailed as exc:
            if self._is_stale(generation):
                logger.info("search_fetch_discarded", url=url, generation=generation)
                return self._store.state
            logger.warning("search_fetch_failed", url=url, generation=generation, error=str(exc))
            return self._store.dispatch(FetchFailure())

        if self._is_stale(generation):
            logger.info("search_fetch_discarded", url=url, generation=generation)
            return self._store.state
        logger.info("search_fetch_succeeded", url=url, generation=generation, hits=len(hits))
        return self._store.dispatch(FetchSuccess(payload=hits))

    def _is_stale(self, generation: int) -> bool:
        return self._discard_stale and generation != self._generation


__all__ = ["Fetcher", "FetchLifecycleController", "ResultSetStore"]
