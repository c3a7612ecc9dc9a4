"""Remote search endpoint integration."""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from hackerstories.config import SearchApiSettings
from hackerstories.domain.models import ResultRecord, SearchResponse
from hackerstories.services.exceptions import FetchFailed


class SearchService:
    """Fetches result records for a query URL, one request per call."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: SearchApiSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or SearchApiSettings()

    async def fetch(self, url: str) -> list[ResultRecord]:
        try:
            response = await self._client.get(
                url,
                timeout=self._settings.request_timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchFailed(f"Search request failed ({exc.response.status_code})") from exc
        except httpx.HTTPError as exc:
            raise FetchFailed(f"Search request failed: {exc}") from exc

        try:
            payload = SearchResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise FetchFailed("Search response body is malformed") from exc
        return payload.hits


__all__ = ["SearchService"]
