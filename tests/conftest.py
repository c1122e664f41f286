from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the src/ directory is importable when tests run via `uv run pytest`.
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from brewstore.persistence import InMemoryUnitOfWork  # noqa: E402
from brewstore.services import BeerService, CustomerService  # noqa: E402


@pytest.fixture()
def memory_uow() -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork()


@pytest.fixture()
def beer_service(memory_uow: InMemoryUnitOfWork) -> BeerService:
    return BeerService(lambda: memory_uow)


@pytest.fixture()
def customer_service(memory_uow: InMemoryUnitOfWork) -> CustomerService:
    return CustomerService(lambda: memory_uow)
