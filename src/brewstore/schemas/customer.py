"""Customer data-transfer object."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import Field

from .base import TransferModel


class CustomerDTO(TransferModel):
    id: str | None = None
    customer_name: Annotated[str | None, Field(max_length=255)] = None
    created_date: datetime | None = None
    last_modified_date: datetime | None = None
