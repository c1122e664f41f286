"""CRUD services exposed to callers."""

from .base import CrudService, UnitOfWorkFactory
from .beers import BeerService
from .customers import CustomerService
from .exceptions import CrudServiceError, InvalidEntityError, NotFoundError

__all__ = [
    "BeerService",
    "CrudService",
    "CrudServiceError",
    "CustomerService",
    "InvalidEntityError",
    "NotFoundError",
    "UnitOfWorkFactory",
]
