"""Generic asynchronous CRUD service over a document repository.

Every operation opens its own unit of work and issues one logical store
write at most. The service keeps no state between calls; concurrent writers
to the same identifier race and the store decides which write lands last.
"""

from __future__ import annotations

import inspect
import logging
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any, ClassVar, Generic, TypeVar

from brewstore.domain import DomainModel
from brewstore.mappers import EntityMapper
from brewstore.persistence import DocumentRepository, UnitOfWork
from brewstore.schemas import TransferModel
from brewstore.utils import next_timestamp, utc_now

from .exceptions import InvalidEntityError, NotFoundError

RecordT = TypeVar("RecordT", bound=DomainModel)
DtoT = TypeVar("DtoT", bound=TransferModel)

UnitOfWorkFactory = Callable[[], UnitOfWork]

_SERVER_FIELDS = frozenset({"id", "created_date", "last_modified_date"})

logger = logging.getLogger(__name__)


class CrudService(ABC, Generic[RecordT, DtoT]):
    """Create, read, update, patch and delete DTOs of one entity kind."""

    entity_label: ClassVar[str]
    required_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        mapper: EntityMapper[RecordT, DtoT],
    ) -> None:
        self._uow_factory = uow_factory
        self._mapper = mapper

    @abstractmethod
    def _repository(self, uow: UnitOfWork) -> DocumentRepository[RecordT]:
        """Select this service's repository from an open unit of work."""

    async def list_all(self) -> AsyncIterator[DtoT]:
        """Yield every stored document as a DTO, in store order."""

        async with self._uow_factory() as uow:
            async for record in self._repository(uow).iter_all():
                yield self._mapper.to_dto(record)

    async def save(self, dto: DtoT | Awaitable[DtoT]) -> DtoT:
        """Insert ``dto`` when it has no id, otherwise overwrite the stored document.

        ``dto`` may also be an awaitable, letting callers chain a pending
        result straight into a save.
        """

        if inspect.isawaitable(dto):
            dto = await dto
        self._validate(dto)
        async with self._uow_factory() as uow:
            repository = self._repository(uow)
            if dto.id:
                existing = await repository.get(dto.id)
                if existing is None:
                    raise NotFoundError(self.entity_label, dto.id)
                record = self._replace(existing, dto)
            else:
                now = utc_now()
                record = self._mapper.to_record(dto).model_copy(
                    update={"id": None, "created_date": now, "last_modified_date": now}
                )
            saved = await repository.upsert(record)
            await uow.commit()
        if dto.id:
            logger.info("Updated %s %s", self.entity_label, saved.id)
        else:
            logger.info("Created %s %s", self.entity_label, saved.id)
        return self._mapper.to_dto(saved)

    async def get_by_id(self, entity_id: str) -> DtoT | None:
        """Return the DTO for ``entity_id`` or ``None`` when it does not exist."""

        async with self._uow_factory() as uow:
            record = await self._repository(uow).get(entity_id)
        if record is None:
            logger.debug("%s %s not found", self.entity_label, entity_id)
            return None
        return self._mapper.to_dto(record)

    async def update_by_id(self, entity_id: str, dto: DtoT) -> DtoT:
        """Replace every field of the stored document with the values in ``dto``.

        Fields ``dto`` leaves unset fall back to their defaults.
        """

        self._validate(dto)
        async with self._uow_factory() as uow:
            repository = self._repository(uow)
            existing = await repository.get(entity_id)
            if existing is None:
                raise NotFoundError(self.entity_label, entity_id)
            saved = await repository.upsert(self._replace(existing, dto))
            await uow.commit()
        logger.info("Updated %s %s", self.entity_label, entity_id)
        return self._mapper.to_dto(saved)

    async def patch_by_id(self, entity_id: str, dto: DtoT) -> DtoT:
        """Overwrite only the fields ``dto`` supplies; leave the rest untouched."""

        async with self._uow_factory() as uow:
            repository = self._repository(uow)
            existing = await repository.get(entity_id)
            if existing is None:
                raise NotFoundError(self.entity_label, entity_id)
            changes: dict[str, Any] = {
                name: value
                for name, value in dto.supplied_fields(exclude=_SERVER_FIELDS).items()
                if getattr(existing, name) != value
            }
            if not changes:
                logger.debug("Patch left %s %s unchanged", self.entity_label, entity_id)
                return self._mapper.to_dto(existing)
            changes["last_modified_date"] = next_timestamp(existing.last_modified_date)
            saved = await repository.upsert(existing.model_copy(update=changes))
            await uow.commit()
        logger.info(
            "Patched %s %s (%s)",
            self.entity_label,
            entity_id,
            ", ".join(sorted(name for name in changes if name != "last_modified_date")),
        )
        return self._mapper.to_dto(saved)

    async def delete_by_id(self, entity_id: str) -> None:
        """Remove the document if present. Deleting an unknown id is not an error."""

        async with self._uow_factory() as uow:
            await self._repository(uow).delete(entity_id)
            await uow.commit()
        logger.info("Deleted %s %s", self.entity_label, entity_id)

    async def find_first_by_name(self, name: str) -> DtoT | None:
        """Return the first document whose name matches ``name`` exactly."""

        async with self._uow_factory() as uow:
            record = await self._repository(uow).find_first_by_name(name)
        if record is None:
            return None
        return self._mapper.to_dto(record)

    def _replace(self, existing: RecordT, dto: DtoT) -> RecordT:
        modified = next_timestamp(existing.last_modified_date)
        return self._mapper.to_record(dto).model_copy(
            update={
                "id": existing.id,
                "created_date": existing.created_date or modified,
                "last_modified_date": modified,
            }
        )

    def _validate(self, dto: DtoT) -> None:
        missing = tuple(
            name
            for name in self.required_fields
            if getattr(dto, name) is None
            or (isinstance(getattr(dto, name), str) and not getattr(dto, name).strip())
        )
        if missing:
            raise InvalidEntityError(self.entity_label, missing)


__all__ = ["CrudService", "UnitOfWorkFactory"]
