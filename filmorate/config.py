"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Core modules never read settings; values reach them through the API layer

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box with no .env
"""

from datetime import date
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from filmorate.core.domain_types import (
    CINEMA_BIRTHDAY, DEFAULT_POPULAR_COUNT, MAX_DESCRIPTION_LENGTH,
)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # API
    app_title: str = "Filmorate API"
    app_version: str = "1.0.0"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Films
    popular_films_default_count: int = DEFAULT_POPULAR_COUNT
    film_description_max_length: int = MAX_DESCRIPTION_LENGTH
    earliest_release_date: date = CINEMA_BIRTHDAY

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
