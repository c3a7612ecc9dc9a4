"""Query URL helpers and the recent-search history derived from them."""

from __future__ import annotations

from typing import Iterable
from urllib.parse import quote, unquote

DEFAULT_HISTORY_WINDOW = 6


def build_query_url(endpoint: str, term: str) -> str:
    return f"{endpoint}{quote(term, safe='')}"


def extract_search_term(endpoint: str, url: str) -> str:
    """Strip the endpoint prefix from ``url`` and decode the remaining term."""

    if url.startswith(endpoint):
        url = url[len(endpoint):]
    return unquote(url)


def derive_history(
    urls: Iterable[str],
    *,
    endpoint: str,
    window: int = DEFAULT_HISTORY_WINDOW,
) -> list[str]:
    """Return prior distinct search terms in chronological order.

    Adjacent repeats collapse into one entry; the same term may reappear once
    something else was searched in between. Only the last ``window`` accepted
    terms are considered and the newest of them is left out, since it belongs
    to the active search.
    """

    accepted: list[str] = []
    for url in urls:
        term = extract_search_term(endpoint, url)
        if accepted and accepted[-1] == term:
            continue
        accepted.append(term)

    return accepted[-window:][:-1]


__all__ = [
    "DEFAULT_HISTORY_WINDOW",
    "build_query_url",
    "derive_history",
    "extract_search_term",
]
