"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden by an ALBUMS_* environment variable
    - get_settings() is cached (lru_cache), single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults for every setting: the service runs out-of-the-box on localhost:8080
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="ALBUMS_", case_sensitive=False,
        extra="ignore",
    )

    # Server
    host: str = "localhost"
    port: int = 8080

    # API / docs
    api_title: str = "Albums API"
    api_description: str = "This service provides API to manage albums."
    api_version: str = "v1.0.0"
    docs_url: str = "/docs"
    cors_origins: list[str] = []

    # Catalog
    seed_catalog: bool = True

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
