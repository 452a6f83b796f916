"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) - single instance per process
    - storage_backend is one of StorageBackend's values (memory, file, sql)

Design Decisions:
    - pydantic-settings BaseSettings with .env file support
    - Every setting has a default (local JSON file storage)
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from docuvault.core.domain_types import StorageBackend, StorageKey


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Storage
    storage_backend: StorageBackend = StorageBackend.FILE
    storage_path: str = "docuvault_storage.json"
    database_url: str = "sqlite:///docuvault.db"
    documents_key: str = StorageKey.DOCUMENTS.value

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("storage_backend", mode="before")
    @classmethod
    def normalize_backend(cls, v: object) -> object:
        """Accept ' SQL ' and friends from the environment."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
