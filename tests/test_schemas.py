from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from brewstore.schemas import BeerDTO, CustomerDTO


def test_supplied_fields_skips_unset_and_blank_values() -> None:
    dto = BeerDTO(beer_name="Crank", beer_style="  ", price=Decimal("0"))

    supplied = dto.supplied_fields(exclude=frozenset({"id"}))

    assert supplied == {"beer_name": "Crank", "price": Decimal("0")}


def test_dto_rejects_negative_amounts_and_long_names() -> None:
    with pytest.raises(ValidationError):
        BeerDTO(beer_name="Crank", price=Decimal("-1"))
    with pytest.raises(ValidationError):
        BeerDTO(beer_name="Crank", quantity_on_hand=-5)
    with pytest.raises(ValidationError):
        CustomerDTO(customer_name="x" * 256)


def test_dto_is_immutable() -> None:
    dto = CustomerDTO(customer_name="Pepe")
    with pytest.raises(ValidationError):
        dto.customer_name = "Maria"  # type: ignore[misc]
