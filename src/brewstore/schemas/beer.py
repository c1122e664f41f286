"""Beer data-transfer object."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import Field

from .base import TransferModel

Name = Annotated[str | None, Field(max_length=255)]


class BeerDTO(TransferModel):
    id: str | None = None
    beer_name: Name = None
    beer_style: Name = None
    upc: Name = None
    quantity_on_hand: Annotated[int | None, Field(ge=0)] = None
    price: Annotated[Decimal | None, Field(ge=0)] = None
    created_date: datetime | None = None
    last_modified_date: datetime | None = None
