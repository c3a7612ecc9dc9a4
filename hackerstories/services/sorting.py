"""Result ordering by sort key and the header toggle rule."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from hackerstories.domain.models import ResultRecord, SortKey, SortState, numeric_value

# Base direction per key: (key function, descending). Python's sort is stable in
# both directions, so ties keep their input order whether or not it is reversed.
_SORTS: dict[SortKey, tuple[Callable[[ResultRecord], Any], bool]] = {
    SortKey.TITLE: (lambda item: item.title, False),
    SortKey.AUTHOR: (lambda item: item.author, False),
    SortKey.COMMENT: (lambda item: numeric_value(item.comment_count), True),
    SortKey.POINT: (lambda item: numeric_value(item.score), True),
}


def sort_results(
    results: Iterable[ResultRecord],
    sort_key: SortKey,
    is_reverse: bool = False,
) -> list[ResultRecord]:
    items = list(results)
    if sort_key == SortKey.NONE:
        return items[::-1] if is_reverse else items

    key_func, descending = _SORTS[sort_key]
    return sorted(items, key=key_func, reverse=descending != is_reverse)


def toggle_sort(current: SortState, selected: SortKey) -> SortState:
    """Flip the direction when the active key is selected again, otherwise switch keys."""

    if selected == current.sort_key:
        return SortState(sort_key=selected, is_reverse=not current.is_reverse)
    return SortState(sort_key=selected, is_reverse=False)


__all__ = ["sort_results", "toggle_sort"]
