"""Customer CRUD service."""

from __future__ import annotations

from brewstore.domain import Customer
from brewstore.mappers import CustomerMapper
from brewstore.persistence import CustomerRepository, UnitOfWork
from brewstore.schemas import CustomerDTO

from .base import CrudService, UnitOfWorkFactory


class CustomerService(CrudService[Customer, CustomerDTO]):
    entity_label = "Customer"
    required_fields = ("customer_name",)

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        mapper: CustomerMapper | None = None,
    ) -> None:
        super().__init__(uow_factory, mapper or CustomerMapper())

    def _repository(self, uow: UnitOfWork) -> CustomerRepository:
        return uow.customer_repository


__all__ = ["CustomerService"]
