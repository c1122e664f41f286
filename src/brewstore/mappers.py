"""Structural translation between stored entities and their DTOs.

Mappers never validate; they only move fields. A DTO field left unset maps to
the entity field's default, so ``to_record`` is total.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from brewstore.domain import Beer, Customer, DomainModel
from brewstore.schemas import BeerDTO, CustomerDTO, TransferModel

RecordT = TypeVar("RecordT", bound=DomainModel)
DtoT = TypeVar("DtoT", bound=TransferModel)


class EntityMapper(Generic[RecordT, DtoT]):
    """Field-for-field mapper shared by every entity kind."""

    record_type: type[RecordT]
    dto_type: type[DtoT]

    def to_dto(self, record: RecordT) -> DtoT:
        return self.dto_type.model_construct(**record.model_dump())

    def to_record(self, dto: DtoT) -> RecordT:
        values: dict[str, Any] = {
            name: value for name, value in dto.model_dump().items() if value is not None
        }
        return self.record_type.model_construct(**values)


class BeerMapper(EntityMapper[Beer, BeerDTO]):
    record_type = Beer
    dto_type = BeerDTO


class CustomerMapper(EntityMapper[Customer, CustomerDTO]):
    record_type = Customer
    dto_type = CustomerDTO


__all__ = ["BeerMapper", "CustomerMapper", "EntityMapper"]
