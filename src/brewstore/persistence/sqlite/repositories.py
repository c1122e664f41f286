"""SQLite repository implementations."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Generic, TypeVar

from sqlalchemy import delete, func, literal_column, select
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from brewstore.domain import Beer, Customer, DomainModel, new_entity_id
from brewstore.persistence.errors import RepositoryError, StoreUnavailableError
from brewstore.persistence.interfaces import BeerRepository, CustomerRepository

from .models import BeerRecord, CustomerRecord

RecordT = TypeVar("RecordT", bound=DomainModel)

# Driver messages meaning the database file could not be reached or was busy.
_UNAVAILABLE_MARKERS = (
    "unable to open database",
    "database is locked",
    "database table is locked",
    "disk i/o error",
)

# SQLite keeps rowid stable across UPDATE, so it reflects insertion order.
_NATURAL_ORDER = literal_column("rowid")


@asynccontextmanager
async def translate_store_errors() -> AsyncIterator[None]:
    """Re-raise driver failures as repository errors.

    Connection and locking failures become :class:`StoreUnavailableError`;
    anything else, such as a missing table, is a plain :class:`RepositoryError`.
    """

    try:
        yield
    except (OperationalError, InterfaceError) as exc:
        detail = str(exc.orig or exc)
        if is_unavailable(exc):
            raise StoreUnavailableError(detail) from exc
        raise RepositoryError(detail) from exc


def is_unavailable(exc: OperationalError | InterfaceError) -> bool:
    if isinstance(exc, InterfaceError) or exc.connection_invalidated:
        return True
    detail = str(exc.orig or exc).lower()
    return any(marker in detail for marker in _UNAVAILABLE_MARKERS)


class _SQLiteDocumentRepository(Generic[RecordT]):
    row_type: type[BeerRecord] | type[CustomerRecord]
    entity_type: type[RecordT]
    name_field: str

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def _to_entity(self, row: BeerRecord | CustomerRecord) -> RecordT:
        return self.entity_type.model_validate(row.payload)

    async def get(self, entity_id: str) -> RecordT | None:
        async with translate_store_errors():
            row = await self._session.get(self.row_type, entity_id)
        if row is None:
            return None
        return self._to_entity(row)

    async def iter_all(self) -> AsyncIterator[RecordT]:
        async with translate_store_errors():
            result = await self._session.execute(
                select(self.row_type).order_by(_NATURAL_ORDER)
            )
            rows = result.scalars().all()
        for row in rows:
            yield self._to_entity(row)

    async def upsert(self, record: RecordT) -> RecordT:
        if not record.id:
            record = record.model_copy(update={"id": new_entity_id()})
        payload = record.model_dump(mode="json")
        name = getattr(record, self.name_field)
        async with translate_store_errors():
            row = await self._session.get(self.row_type, record.id)
            if row is None:
                row = self.row_type(id=record.id, name=name, payload=payload)
                self._session.add(row)
            else:
                row.name = name
                row.payload = payload
            await self._session.flush()
        return record

    async def delete(self, entity_id: str) -> None:
        async with translate_store_errors():
            await self._session.execute(
                delete(self.row_type).where(self.row_type.id == entity_id)
            )

    async def delete_all(self) -> None:
        async with translate_store_errors():
            await self._session.execute(delete(self.row_type))

    async def count(self) -> int:
        async with translate_store_errors():
            result = await self._session.execute(
                select(func.count()).select_from(self.row_type)
            )
        return int(result.scalar_one())

    async def find_first_by_name(self, name: str) -> RecordT | None:
        stmt = (
            select(self.row_type)
            .where(self.row_type.name == name)
            .order_by(_NATURAL_ORDER)
            .limit(1)
        )
        async with translate_store_errors():
            result = await self._session.execute(stmt)
        row = result.scalars().first()
        if row is None:
            return None
        return self._to_entity(row)


class SQLiteBeerRepository(_SQLiteDocumentRepository[Beer], BeerRepository):
    row_type = BeerRecord
    entity_type = Beer
    name_field = "beer_name"


class SQLiteCustomerRepository(_SQLiteDocumentRepository[Customer], CustomerRepository):
    row_type = CustomerRecord
    entity_type = Customer
    name_field = "customer_name"


__all__ = [
    "SQLiteBeerRepository",
    "SQLiteCustomerRepository",
    "is_unavailable",
    "translate_store_errors",
]
