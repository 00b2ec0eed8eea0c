"""Lightweight configuration for polydice."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Minimal library settings, read from ``POLYDICE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="POLYDICE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    seed: int | None = Field(
        default=None,
        description="Base seed for each thread's default random source; OS entropy when unset",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
