"""Startup data seeding.

On start the seeder clears both collections and, once a collection reports
zero documents, loads a fixed set of sample beers and customers. Seeding is
scheduled as a background task; the services do not wait for it.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from brewstore.domain import Beer, Customer
from brewstore.persistence import DocumentRepository, UnitOfWork
from brewstore.services import UnitOfWorkFactory
from brewstore.utils import utc_now

logger = logging.getLogger(__name__)


def sample_beers() -> tuple[Beer, ...]:
    now = utc_now()
    return (
        Beer(
            beer_name="Galaxy Cat",
            beer_style="Pale Ale",
            upc="12356",
            price=Decimal("12.99"),
            quantity_on_hand=122,
            created_date=now,
            last_modified_date=now,
        ),
        Beer(
            beer_name="Crank",
            beer_style="Pale Ale",
            upc="12356222",
            price=Decimal("11.99"),
            quantity_on_hand=392,
            created_date=now,
            last_modified_date=now,
        ),
        Beer(
            beer_name="Sunshine City",
            beer_style="IPA",
            upc="12356",
            price=Decimal("13.99"),
            quantity_on_hand=144,
            created_date=now,
            last_modified_date=now,
        ),
    )


def sample_customers() -> tuple[Customer, ...]:
    now = utc_now()
    return tuple(
        Customer(customer_name=name, created_date=now, last_modified_date=now)
        for name in ("Miguel", "Pepe", "Maria")
    )


class BootstrapSeeder:
    """Reset the store to the sample data set."""

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def run(self) -> tuple[int, int]:
        """Clear and repopulate both collections, returning the final counts."""

        beers = await self._load_beers()
        customers = await self._load_customers()
        return beers, customers

    def start(self) -> asyncio.Task[tuple[int, int]]:
        """Schedule :meth:`run` on the running loop without waiting for it."""

        task = asyncio.create_task(self.run(), name="brewstore-bootstrap")
        task.add_done_callback(_report_failure)
        return task

    async def _load_beers(self) -> int:
        async with self._uow_factory() as uow:
            repository = uow.beer_repository
            await repository.delete_all()
            if await repository.count() == 0:
                await _insert_all(uow, repository, sample_beers())
            loaded = await repository.count()
        logger.info("Loaded Beers: %d", loaded)
        return loaded

    async def _load_customers(self) -> int:
        async with self._uow_factory() as uow:
            repository = uow.customer_repository
            await repository.delete_all()
            if await repository.count() == 0:
                await _insert_all(uow, repository, sample_customers())
            loaded = await repository.count()
        logger.info("Loaded Customers: %d", loaded)
        return loaded


async def _insert_all(
    uow: UnitOfWork,
    repository: DocumentRepository[Any],
    records: Sequence[Beer | Customer],
) -> None:
    for record in records:
        saved = await repository.upsert(record)
        logger.debug("Seeded %r", saved)
    await uow.commit()


def _report_failure(task: asyncio.Task[tuple[int, int]]) -> None:
    if task.cancelled():
        logger.warning("Bootstrap seeding was cancelled")
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Bootstrap seeding failed", exc_info=exc)


__all__ = ["BootstrapSeeder", "sample_beers", "sample_customers"]
