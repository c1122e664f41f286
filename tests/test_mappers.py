from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal

from brewstore.domain import Beer, BeerId, Customer, CustomerId
from brewstore.mappers import BeerMapper, CustomerMapper
from brewstore.schemas import BeerDTO, CustomerDTO


def test_beer_record_round_trip_is_identity() -> None:
    mapper = BeerMapper()
    stamp = datetime(2024, 5, 1, 12, 30, tzinfo=UTC)
    beer = Beer(
        id=BeerId("abc123"),
        beer_name="Galaxy Cat",
        beer_style="Pale Ale",
        upc="12356",
        quantity_on_hand=122,
        price=Decimal("12.99"),
        created_date=stamp,
        last_modified_date=stamp,
    )

    dto = mapper.to_dto(beer)

    assert isinstance(dto, BeerDTO)
    assert dto.id == "abc123"
    assert dto.price == Decimal("12.99")
    assert mapper.to_record(dto).model_dump() == beer.model_dump()


def test_beer_dto_without_id_maps_to_unpersisted_record() -> None:
    mapper = BeerMapper()
    dto = BeerDTO(beer_name="Crank", price=Decimal("11.99"))

    beer = mapper.to_record(dto)

    assert beer.id is None
    assert beer.beer_name == "Crank"
    assert beer.price == Decimal("11.99")
    assert beer.beer_style == ""
    assert beer.quantity_on_hand == 0

    back = mapper.to_dto(beer)
    assert back.beer_name == dto.beer_name
    assert back.price == dto.price
    assert back.id is None


def test_customer_mapper_preserves_fields() -> None:
    mapper = CustomerMapper()
    customer = Customer(id=CustomerId("c-1"), customer_name="Miguel")

    dto = mapper.to_dto(customer)

    assert isinstance(dto, CustomerDTO)
    assert dto.customer_name == "Miguel"
    assert mapper.to_record(dto).model_dump() == customer.model_dump()
    assert mapper.to_record(CustomerDTO()).customer_name == ""
