"""Service container wiring application components."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

from brewstore.bootstrap import BootstrapSeeder
from brewstore.config import STORE_BACKENDS, AppSettings
from brewstore.persistence import create_memory_unit_of_work_factory
from brewstore.persistence.sqlite import create_sqlite_unit_of_work_factory
from brewstore.services import BeerService, CustomerService, UnitOfWorkFactory

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Aggregates services sharing one store and configuration."""

    settings: AppSettings
    unit_of_work_factory: UnitOfWorkFactory
    beer_service: BeerService
    customer_service: CustomerService
    seeder: BootstrapSeeder

    def start_background_tasks(self) -> asyncio.Task[tuple[int, int]] | None:
        """Kick off startup seeding when enabled; callers are not made to wait."""

        if not self.settings.seed_on_start:
            return None
        logger.info("Seeding sample data in the background")
        return self.seeder.start()


def _ensure_sqlite_directory(database_url: str) -> None:
    if not database_url.startswith("sqlite"):
        return
    try:
        _, path = database_url.split(":///", maxsplit=1)
    except ValueError:
        return
    if not path or path == ":memory:":
        return
    db_path = Path(path).expanduser()
    db_path.parent.mkdir(parents=True, exist_ok=True)


def _build_unit_of_work_factory(settings: AppSettings) -> UnitOfWorkFactory:
    if settings.store_backend not in STORE_BACKENDS:
        choices = ", ".join(sorted(STORE_BACKENDS))
        msg = f"Unsupported store backend '{settings.store_backend}'. Expected one of: {choices}"
        raise ValueError(msg)
    if settings.store_backend == "memory":
        logger.info("Using in-memory store")
        return create_memory_unit_of_work_factory()
    _ensure_sqlite_directory(settings.database_url)
    logger.info("Using SQLite store at %s", settings.database_url)
    return create_sqlite_unit_of_work_factory(settings.database_url)


def build_container(settings: AppSettings | None = None) -> ServiceContainer:
    """Construct the primary service container."""

    resolved_settings = settings or AppSettings.from_env()
    unit_of_work_factory = _build_unit_of_work_factory(resolved_settings)

    return ServiceContainer(
        settings=resolved_settings,
        unit_of_work_factory=unit_of_work_factory,
        beer_service=BeerService(unit_of_work_factory),
        customer_service=CustomerService(unit_of_work_factory),
        seeder=BootstrapSeeder(unit_of_work_factory),
    )


__all__ = ["ServiceContainer", "build_container"]
