"""Customer domain model."""

from __future__ import annotations

from datetime import datetime

from .base import DomainModel
from .types import CustomerId


class Customer(DomainModel):
    id: CustomerId | None = None
    customer_name: str = ""
    created_date: datetime | None = None
    last_modified_date: datetime | None = None
