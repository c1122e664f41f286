"""Persistence layer abstractions for repositories and unit of work."""

from __future__ import annotations

from collections.abc import AsyncIterator
from types import TracebackType
from typing import Protocol, TypeVar

from brewstore.domain import Beer, Customer, DomainModel

RecordT = TypeVar("RecordT", bound=DomainModel)


class DocumentRepository(Protocol[RecordT]):
    """Document-style storage for one entity kind.

    Reads return ``None`` for missing documents. ``upsert`` inserts a document
    whose ``id`` is unset (assigning one) and replaces it by ``id`` otherwise.
    """

    async def get(self, entity_id: str) -> RecordT | None: ...

    def iter_all(self) -> AsyncIterator[RecordT]: ...

    async def upsert(self, record: RecordT) -> RecordT: ...

    async def delete(self, entity_id: str) -> None: ...

    async def delete_all(self) -> None: ...

    async def count(self) -> int: ...

    async def find_first_by_name(self, name: str) -> RecordT | None: ...


class BeerRepository(DocumentRepository[Beer], Protocol):
    """Beer documents, matched by ``beer_name``."""


class CustomerRepository(DocumentRepository[Customer], Protocol):
    """Customer documents, matched by ``customer_name``."""


class UnitOfWork(Protocol):
    """Scope for the store calls issued by a single service operation."""

    beer_repository: BeerRepository
    customer_repository: CustomerRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
