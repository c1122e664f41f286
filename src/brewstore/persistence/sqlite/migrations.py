"""Versioned schema steps for the SQLite document store.

The highest applied step is recorded in ``brewstore_schema_version``; only
steps above it run, each in its own transaction.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from sqlalchemy import Connection, text
from sqlalchemy.ext.asyncio import AsyncEngine

from .models import Base, BeerRecord, CustomerRecord

logger = logging.getLogger(__name__)

Step = Callable[[Connection], None]


def _create_document_tables(conn: Connection) -> None:
    Base.metadata.create_all(conn, tables=[BeerRecord.__table__, CustomerRecord.__table__])


MIGRATIONS: tuple[tuple[int, Step], ...] = ((1, _create_document_tables),)


async def current_version(engine: AsyncEngine) -> int:
    async with engine.begin() as conn:
        await conn.execute(
            text(
                "CREATE TABLE IF NOT EXISTS brewstore_schema_version "
                "(version INTEGER PRIMARY KEY)"
            )
        )
        result = await conn.execute(text("SELECT MAX(version) FROM brewstore_schema_version"))
        return result.scalar() or 0


async def apply_migrations(engine: AsyncEngine) -> int:
    """Run pending steps and return the resulting schema version."""

    version = await current_version(engine)
    for target, step in MIGRATIONS:
        if target <= version:
            continue
        async with engine.begin() as conn:
            await conn.run_sync(step)
            await conn.execute(
                text("INSERT INTO brewstore_schema_version (version) VALUES (:version)"),
                {"version": target},
            )
        logger.info("Applied schema step %d", target)
        version = target
    return version


__all__ = ["MIGRATIONS", "apply_migrations", "current_version"]
