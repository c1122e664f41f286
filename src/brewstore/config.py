"""Lightweight application configuration loader."""

from __future__ import annotations

import os
from dataclasses import dataclass

STORE_BACKENDS = frozenset({"sqlite", "memory"})


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no"}


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    database_url: str = "sqlite+aiosqlite:///brewstore.db"
    store_backend: str = "sqlite"
    seed_on_start: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("BREWSTORE_ENV", cls.environment),
            database_url=os.getenv("BREWSTORE_DATABASE_URL", cls.database_url),
            store_backend=os.getenv("BREWSTORE_STORE", cls.store_backend).strip().lower(),
            seed_on_start=_env_bool("BREWSTORE_SEED_ON_START", cls.seed_on_start),
            log_level=os.getenv("BREWSTORE_LOG_LEVEL", cls.log_level).strip().upper(),
        )


__all__ = ["STORE_BACKENDS", "AppSettings"]
