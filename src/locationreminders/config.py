# Settings for the reminder store, read from LOCATIONREMINDERS_* env vars.
# Created: 2026-10-19

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

StoreBackend = Literal["sqlite", "json", "memory"]


class Settings(BaseSettings):
    """Reminder store configuration.

    Every field can be overridden with an environment variable, e.g.
    ``LOCATIONREMINDERS_STORE_BACKEND=json``.
    """

    model_config = SettingsConfigDict(env_prefix="LOCATIONREMINDERS_", extra="ignore")

    store_backend: StoreBackend = Field(
        default="sqlite", description="Which store backend to use: sqlite, json or memory"
    )
    data_dir: Path = Field(
        default_factory=lambda: Path.home() / ".locationreminders",
        description="Directory holding durable store files",
    )
    db_url: str | None = Field(
        default=None, description="SQLAlchemy URL; defaults to <data_dir>/reminders.db"
    )
    json_path: Path | None = Field(
        default=None, description="JSON store file; defaults to <data_dir>/reminders.json"
    )

    def resolved_db_url(self) -> str:
        if self.db_url:
            return self.db_url
        return f"sqlite:///{(self.data_dir / 'reminders.db').as_posix()}"

    def resolved_json_path(self) -> Path:
        return self.json_path or self.data_dir / "reminders.json"


@lru_cache
def get_settings() -> Settings:
    """Get the cached settings instance."""
    return Settings()


def get_config_dir() -> Path:
    """Get the data directory (not created here)."""
    return get_settings().data_dir
