"""Application configuration using Pydantic settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, HttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CATALOG_SOURCES = [
    HttpUrl("https://run.mocky.io/v3/cc147902-4a5a-4b1a-bc00-2220bafb49fd"),
    HttpUrl("https://pastebin.com/raw/JucRNpWs"),
]

# Words too common to say anything about the catalog
DEFAULT_STOP_WORDS = ["the", "and", "for", "with", "this"]

DEFAULT_COMMON_WORDS_LIMIT = 10


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = True

    # API
    api_prefix: str = ""
    project_name: str = "Catalog Filter API"
    version: str = "0.1.0"

    # Catalog sources, tried in order until one succeeds
    catalog_sources: list[HttpUrl] = Field(
        default_factory=lambda: list(DEFAULT_CATALOG_SOURCES), min_length=1
    )
    catalog_fetch_timeout: float = Field(10.0, gt=0)

    # Aggregation and highlighting
    common_words_limit: int = Field(DEFAULT_COMMON_WORDS_LIMIT, ge=0)
    stop_words: list[str] = Field(default_factory=lambda: list(DEFAULT_STOP_WORDS))
    highlight_tag: str = Field("em", pattern=r"^[A-Za-z][A-Za-z0-9]*$")

    # Logging
    log_json: bool = True

    # Error tracking
    sentry_dsn: str = ""

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    @property
    def catalog_source_urls(self) -> list[str]:
        """Catalog source URLs as plain strings, in fallback order."""
        return [str(url) for url in self.catalog_sources]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
