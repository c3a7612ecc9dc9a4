"""Lifecycle transitions applied to the result set and the pure reducer over them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from hackerstories.domain.models import ResultRecord, ResultSetState
from hackerstories.services.exceptions import UnknownTransition


@dataclass(frozen=True, slots=True)
class FetchInit:
    pass


@dataclass(frozen=True, slots=True)
class FetchSuccess:
    payload: Sequence[ResultRecord]


@dataclass(frozen=True, slots=True)
class FetchFailure:
    pass


@dataclass(frozen=True, slots=True)
class RemoveResult:
    record_id: str


ResultSetTransition = FetchInit | FetchSuccess | FetchFailure | RemoveResult


def reduce_result_set(state: ResultSetState, transition: ResultSetTransition) -> ResultSetState:
    """Return the state that follows ``state`` once ``transition`` is applied.

    Results are replaced wholesale on success, kept on failure and filtered by
    identity on removal. Removing an identity that is not present returns an
    equal state.
    """

    if isinstance(transition, FetchInit):
        return state.model_copy(update={"is_loading": True, "is_error": False})
    if isinstance(transition, FetchSuccess):
        return state.model_copy(
            update={
                "is_loading": False,
                "is_error": False,
                "results": tuple(transition.payload),
            }
        )
    if isinstance(transition, FetchFailure):
        return state.model_copy(update={"is_loading": False, "is_error": True})
    if isinstance(transition, RemoveResult):
        remaining = tuple(item for item in state.results if item.id != transition.record_id)
        return state.model_copy(update={"results": remaining})
    raise UnknownTransition(f"Unsupported transition: {transition!r}")


__all__ = [
    "FetchFailure",
    "FetchInit",
    "FetchSuccess",
    "RemoveResult",
    "ResultSetTransition",
    "reduce_result_set",
]
