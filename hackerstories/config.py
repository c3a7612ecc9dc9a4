"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SearchApiSettings(BaseModel):
    endpoint: str = Field(
        default="https://hn.algolia.com/api/v1/search?query=",
        description="Fixed query URL prefix; the search term is appended to it.",
    )
    request_timeout_seconds: int = Field(default=10, ge=1, le=60)

    @field_validator("endpoint")
    @classmethod
    def _require_http(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("endpoint must be an http(s) URL")
        return value


class DatabaseSettings(BaseModel):
    dsn: str = Field(
        default="sqlite+aiosqlite:///./hackerstories.db",
        description="SQLAlchemy async DSN for the key/value store.",
    )
    echo: bool = False


class HistorySettings(BaseModel):
    window: int = Field(
        default=6,
        ge=1,
        le=50,
        description="Accepted terms kept before the newest one is dropped.",
    )


class TermSettings(BaseModel):
    storage_key: str = Field(default="search", min_length=1)
    default_term: str = "React"


class FetchSettings(BaseModel):
    discard_stale_responses: bool = True


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HS_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"

    search_api: SearchApiSettings = Field(default_factory=SearchApiSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    history: HistorySettings = Field(default_factory=HistorySettings)
    term: TermSettings = Field(default_factory=TermSettings)
    fetch: FetchSettings = Field(default_factory=FetchSettings)


@lru_cache
def get_settings() -> AppSettings:
    """Return cached settings instance."""

    return AppSettings()


__all__ = [
    "AppSettings",
    "DatabaseSettings",
    "FetchSettings",
    "HistorySettings",
    "SearchApiSettings",
    "TermSettings",
    "get_settings",
]
