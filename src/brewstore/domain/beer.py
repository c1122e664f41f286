"""Beer domain model."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from .base import DomainModel
from .types import BeerId


class Beer(DomainModel):
    """A beer as it is kept in the store.

    ``id`` stays ``None`` until the store has persisted the document.
    """

    id: BeerId | None = None
    beer_name: str = ""
    beer_style: str = ""
    upc: str = ""
    quantity_on_hand: int = 0
    price: Decimal = Decimal("0")
    created_date: datetime | None = None
    last_modified_date: datetime | None = None
