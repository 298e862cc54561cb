"""Runtime settings sourced from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


DEFAULT_DATABASE_URL = "sqlite+pysqlite:///crime-database.db"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    auto_migrate: bool = True
    log_level: str = DEFAULT_LOG_LEVEL


def _normalize_bool(value: str | None, default: bool = True) -> bool:
    """Return normalized boolean from environment-style value."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"", "0", "false", "no", "off"}:
        return False
    if normalized in {"1", "true", "yes", "on"}:
        return True
    return default


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Return the cached settings built from environment variables.

    ``CRIME_INTENT_DATABASE_URL`` selects the store (a local SQLite file by
    default), ``CRIME_INTENT_AUTO_MIGRATE`` toggles running migrations at
    startup and ``LOG_LEVEL`` sets the root log level.
    """
    database_url = os.getenv("CRIME_INTENT_DATABASE_URL") or DEFAULT_DATABASE_URL
    return Settings(
        database_url=database_url.strip(),
        auto_migrate=_normalize_bool(os.getenv("CRIME_INTENT_AUTO_MIGRATE"), default=True),
        log_level=(os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper(),
    )


def refresh_settings_cache() -> None:
    """Invalidate cached settings (useful for tests)."""
    get_settings.cache_clear()
