"""Pydantic models shared across the state and service layers."""

from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

Numeric = int | float | str


def numeric_value(value: Numeric) -> float:
    """Return the numeric value of a count carried as a number or numeric string."""

    if isinstance(value, str):
        return float(value.strip())
    return float(value)


class ResultRecord(BaseModel):
    """One search hit as returned by the remote endpoint."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="objectID")
    url: str | None = None
    title: str = ""
    author: str = ""
    comment_count: Numeric = Field(default=0, alias="num_comments")
    score: Numeric = Field(default=0, alias="points")

    @field_validator("title", "author", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("comment_count", "score", mode="before")
    @classmethod
    def _none_to_zero(cls, value):
        return 0 if value is None else value

    @field_validator("comment_count", "score")
    @classmethod
    def _check_numeric(cls, value: Numeric) -> Numeric:
        try:
            number = numeric_value(value)
        except ValueError as exc:
            raise ValueError(f"not a numeric value: {value!r}") from exc
        if not math.isfinite(number):
            raise ValueError(f"not a finite value: {value!r}")
        return value

    @field_validator("comment_count")
    @classmethod
    def _check_non_negative(cls, value: Numeric) -> Numeric:
        if numeric_value(value) < 0:
            raise ValueError("comment count must not be negative")
        return value


class SearchResponse(BaseModel):
    hits: list[ResultRecord]


class ResultSetState(BaseModel):
    model_config = ConfigDict(frozen=True)

    results: tuple[ResultRecord, ...] = ()
    is_loading: bool = False
    is_error: bool = False


class SortKey(str, Enum):
    NONE = "NONE"
    TITLE = "TITLE"
    AUTHOR = "AUTHOR"
    COMMENT = "COMMENT"
    POINT = "POINT"


class SortState(BaseModel):
    model_config = ConfigDict(frozen=True)

    sort_key: SortKey = SortKey.NONE
    is_reverse: bool = False


__all__ = [
    "Numeric",
    "ResultRecord",
    "ResultSetState",
    "SearchResponse",
    "SortKey",
    "SortState",
    "numeric_value",
]
