"""Persistence layer: repository protocols and store implementations."""

from .errors import RepositoryError, StoreUnavailableError
from .interfaces import BeerRepository, CustomerRepository, DocumentRepository, UnitOfWork
from .memory import (
    InMemoryBeerRepository,
    InMemoryCustomerRepository,
    InMemoryUnitOfWork,
    create_memory_unit_of_work_factory,
)

__all__ = [
    "BeerRepository",
    "CustomerRepository",
    "DocumentRepository",
    "InMemoryBeerRepository",
    "InMemoryCustomerRepository",
    "InMemoryUnitOfWork",
    "RepositoryError",
    "StoreUnavailableError",
    "UnitOfWork",
    "create_memory_unit_of_work_factory",
]
