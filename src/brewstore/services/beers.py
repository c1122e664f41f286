"""Beer CRUD service."""

from __future__ import annotations

from brewstore.domain import Beer
from brewstore.mappers import BeerMapper
from brewstore.persistence import BeerRepository, UnitOfWork
from brewstore.schemas import BeerDTO

from .base import CrudService, UnitOfWorkFactory


class BeerService(CrudService[Beer, BeerDTO]):
    entity_label = "Beer"
    required_fields = ("beer_name",)

    def __init__(self, uow_factory: UnitOfWorkFactory, mapper: BeerMapper | None = None) -> None:
        super().__init__(uow_factory, mapper or BeerMapper())

    def _repository(self, uow: UnitOfWork) -> BeerRepository:
        return uow.beer_repository


__all__ = ["BeerService"]
