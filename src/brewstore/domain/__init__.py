"""Domain models persisted by the store."""

from .base import DomainModel
from .beer import Beer
from .customer import Customer
from .types import BeerId, CustomerId, new_entity_id

__all__ = [
    "Beer",
    "BeerId",
    "Customer",
    "CustomerId",
    "DomainModel",
    "new_entity_id",
]
