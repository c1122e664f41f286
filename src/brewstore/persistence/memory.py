"""In-memory repository implementations for unit testing."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from copy import deepcopy
from dataclasses import dataclass, field
from types import TracebackType
from typing import Generic, TypeVar

from brewstore.domain import Beer, Customer, DomainModel, new_entity_id
from brewstore.persistence.interfaces import BeerRepository, CustomerRepository, UnitOfWork

T = TypeVar("T")
RecordT = TypeVar("RecordT", bound=DomainModel)


def _copy(value: T) -> T:
    return deepcopy(value)


@dataclass
class _InMemoryDocumentRepository(Generic[RecordT]):
    name_field: str = "name"
    _documents: dict[str, RecordT] = field(default_factory=dict)

    async def get(self, entity_id: str) -> RecordT | None:
        return _copy(self._documents.get(entity_id))

    async def iter_all(self) -> AsyncIterator[RecordT]:
        for document in list(self._documents.values()):
            yield _copy(document)

    async def upsert(self, record: RecordT) -> RecordT:
        if not record.id:
            record = record.model_copy(update={"id": new_entity_id()})
        self._documents[record.id] = record
        return _copy(record)

    async def delete(self, entity_id: str) -> None:
        self._documents.pop(entity_id, None)

    async def delete_all(self) -> None:
        self._documents.clear()

    async def count(self) -> int:
        return len(self._documents)

    async def find_first_by_name(self, name: str) -> RecordT | None:
        for document in self._documents.values():
            if getattr(document, self.name_field) == name:
                return _copy(document)
        return None


@dataclass
class InMemoryBeerRepository(_InMemoryDocumentRepository[Beer], BeerRepository):
    name_field: str = "beer_name"


@dataclass
class InMemoryCustomerRepository(_InMemoryDocumentRepository[Customer], CustomerRepository):
    name_field: str = "customer_name"


@dataclass
class InMemoryUnitOfWork(UnitOfWork):
    beer_repository: InMemoryBeerRepository = field(default_factory=InMemoryBeerRepository)
    customer_repository: InMemoryCustomerRepository = field(
        default_factory=InMemoryCustomerRepository
    )

    async def __aenter__(self) -> InMemoryUnitOfWork:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        return None

    async def commit(self) -> None:
        return None

    async def rollback(self) -> None:
        return None


def create_memory_unit_of_work_factory() -> Callable[[], InMemoryUnitOfWork]:
    """Return a factory handing out one shared in-memory store."""

    uow = InMemoryUnitOfWork()

    def factory() -> InMemoryUnitOfWork:
        return uow

    return factory


__all__ = [
    "InMemoryBeerRepository",
    "InMemoryCustomerRepository",
    "InMemoryUnitOfWork",
    "create_memory_unit_of_work_factory",
]
