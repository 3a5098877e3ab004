"""Configuration helpers for the scorecard service."""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class _Settings(BaseSettings):
    max_holes: int = Field(default=36, alias="SCORECARD_MAX_HOLES")
    default_holes: int = Field(default=18, alias="SCORECARD_DEFAULT_HOLES")
    cors_allow_origins: str = Field(
        default="http://localhost,http://127.0.0.1", alias="CORS_ALLOW_ORIGINS"
    )
    build_version: str = Field(default="dev", alias="BUILD_VERSION")
    git_sha: str = Field(default="unknown", alias="GIT_SHA")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]


@lru_cache(maxsize=1)
def get_settings() -> _Settings:
    """Return cached application settings."""

    return _Settings()  # type: ignore[call-arg]


def reset_settings_cache() -> None:
    """Clear cached settings (primarily for tests)."""

    get_settings.cache_clear()


def env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def parse_keys(raw: str | None) -> set[str]:
    return {key.strip() for key in (raw or "").split(",") if key.strip()}


def load_api_keys() -> set[str]:
    """Return the set of API keys accepted when key checks are enabled.

    Read from the environment on every call so tests can toggle keys.
    """

    allowed = parse_keys(os.getenv("SCORECARD_API_KEYS"))
    primary = os.getenv("API_KEY")
    if primary:
        allowed.add(primary)
    return allowed


__all__ = [
    "get_settings",
    "reset_settings_cache",
    "env_bool",
    "parse_keys",
    "load_api_keys",
]
