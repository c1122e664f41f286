"""Async SQLite unit of work implementation."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from types import TracebackType

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from brewstore.persistence.interfaces import UnitOfWork

from .migrations import apply_migrations
from .repositories import SQLiteBeerRepository, SQLiteCustomerRepository, translate_store_errors


class MigrationGate:
    """Runs schema migrations once for one engine.

    The lock is created on the running loop and replaced when a later
    ``asyncio.run`` brings a new loop, since a lock cannot cross loops.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine
        self._lock: asyncio.Lock | None = None
        self._loop: asyncio.AbstractEventLoop | None = None
        self.migrated = False

    def _current_lock(self) -> asyncio.Lock:
        loop = asyncio.get_running_loop()
        if self._lock is None or self._loop is not loop:
            self._lock = asyncio.Lock()
            self._loop = loop
        return self._lock

    async def ensure(self) -> None:
        if self.migrated:
            return
        async with self._current_lock():
            if self.migrated:
                return
            async with translate_store_errors():
                await apply_migrations(self._engine)
            self.migrated = True


class SQLiteUnitOfWork(UnitOfWork):
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        migrations: MigrationGate,
    ) -> None:
        self._session_factory = session_factory
        self._migrations = migrations
        self._session: AsyncSession | None = None

    async def __aenter__(self) -> SQLiteUnitOfWork:
        await self._migrations.ensure()
        self._session = self._session_factory()
        self.beer_repository = SQLiteBeerRepository(self._session)
        self.customer_repository = SQLiteCustomerRepository(self._session)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._session is None:
            return
        try:
            if exc_type is not None:
                await self._session.rollback()
            else:
                async with translate_store_errors():
                    await self._session.commit()
        finally:
            await self._session.close()
            self._session = None

    async def commit(self) -> None:
        if self._session is None:
            raise RuntimeError("UnitOfWork session not started")
        async with translate_store_errors():
            await self._session.commit()

    async def rollback(self) -> None:
        if self._session is None:
            raise RuntimeError("UnitOfWork session not started")
        await self._session.rollback()


def create_sqlite_unit_of_work_factory(database_url: str) -> Callable[[], SQLiteUnitOfWork]:
    engine = create_async_engine(database_url, future=True)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    migrations = MigrationGate(engine)

    def factory() -> SQLiteUnitOfWork:
        return SQLiteUnitOfWork(session_factory, migrations)

    return factory


__all__ = ["MigrationGate", "SQLiteUnitOfWork", "create_sqlite_unit_of_work_factory"]
