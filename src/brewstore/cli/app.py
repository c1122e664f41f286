"""Typer CLI wiring brewstore services."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from brewstore.persistence import RepositoryError
from brewstore.schemas import BeerDTO, CustomerDTO, TransferModel
from brewstore.services import CrudService, CrudServiceError

from .deps import get_container

T = TypeVar("T")

app = typer.Typer(help="brewstore command-line interface")
beers_app = typer.Typer(help="Manage beers")
customers_app = typer.Typer(help="Manage customers")
app.add_typer(beers_app, name="beers")
app.add_typer(customers_app, name="customers")

console = Console()


@app.callback()
def main() -> None:
    """Configure logging from the resolved settings."""

    settings = get_container().settings
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _run(operation: Callable[[], Awaitable[T]]) -> T:
    container = get_container()

    async def _main() -> T:
        seeding = container.start_background_tasks()
        try:
            return await operation()
        finally:
            if seeding is not None:
                await seeding

    try:
        return asyncio.run(_main())
    except (CrudServiceError, RepositoryError) as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc


def _build_dto(factory: Callable[[], T]) -> T:
    try:
        return factory()
    except ValidationError as exc:
        typer.echo(f"Invalid input: {exc.error_count()} error(s)")
        for error in exc.errors():
            location = ".".join(str(part) for part in error["loc"])
            typer.echo(f"  {location}: {error['msg']}")
        raise typer.Exit(code=1) from exc


def _echo_dto(dto: TransferModel | None, missing: str) -> None:
    if dto is None:
        typer.echo(missing)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(dto.model_dump(mode="json"), indent=2))


def _print_table(title: str, columns: tuple[str, ...], rows: list[TransferModel]) -> None:
    if not rows:
        typer.echo(f"No {title.lower()} found")
        return
    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    for column in columns:
        table.add_column(column.replace("_", " ").title())
    for row in rows:
        values = row.model_dump()
        table.add_row(str(row.id), *(str(values[column]) for column in columns))
    console.print(table)


async def _collect(service: CrudService) -> list[TransferModel]:
    return [dto async for dto in service.list_all()]


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    settings = get_container().settings
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Store:\t\t" + settings.store_backend)
    typer.echo("Database URL:\t" + settings.database_url)
    typer.echo("Seed on start:\t" + str(settings.seed_on_start).lower())


@app.command("seed")
def seed() -> None:
    """Reset the store to the sample beers and customers."""

    seeder = get_container().seeder
    beers, customers = _run(seeder.run)
    typer.echo(f"Loaded {beers} beers and {customers} customers")


# ----------------------------------------------------------------- beers

_BEER_COLUMNS = ("beer_name", "beer_style", "upc", "quantity_on_hand", "price")


@beers_app.command("list")
def list_beers() -> None:
    """List every beer."""

    service = get_container().beer_service
    _print_table("Beers", _BEER_COLUMNS, _run(lambda: _collect(service)))


@beers_app.command("get")
def get_beer(beer_id: str) -> None:
    """Show one beer."""

    service = get_container().beer_service
    _echo_dto(_run(lambda: service.get_by_id(beer_id)), f"Beer {beer_id} not found")


@beers_app.command("find")
def find_beer(name: str) -> None:
    """Show the first beer whose name matches exactly."""

    service = get_container().beer_service
    _echo_dto(_run(lambda: service.find_first_by_name(name)), f"No beer named {name!r}")


@beers_app.command("create")
def create_beer(
    name: str = typer.Option(..., "--name", help="Beer name"),
    style: str | None = typer.Option(None, "--style"),
    upc: str | None = typer.Option(None, "--upc"),
    quantity: int | None = typer.Option(None, "--quantity", min=0),
    price: str | None = typer.Option(None, "--price", help="Decimal price, e.g. 12.99"),
) -> None:
    """Create a beer."""

    service = get_container().beer_service
    dto = _build_dto(
        lambda: BeerDTO(
            beer_name=name, beer_style=style, upc=upc, quantity_on_hand=quantity, price=price
        )
    )
    saved = _run(lambda: service.save(dto))
    typer.echo(f"Created beer {saved.id}")


@beers_app.command("update")
def update_beer(
    beer_id: str,
    name: str = typer.Option(..., "--name", help="Beer name"),
    style: str | None = typer.Option(None, "--style"),
    upc: str | None = typer.Option(None, "--upc"),
    quantity: int | None = typer.Option(None, "--quantity", min=0),
    price: str | None = typer.Option(None, "--price"),
) -> None:
    """Replace every field of a beer; omitted options reset to defaults."""

    service = get_container().beer_service
    dto = _build_dto(
        lambda: BeerDTO(
            beer_name=name, beer_style=style, upc=upc, quantity_on_hand=quantity, price=price
        )
    )
    _echo_dto(_run(lambda: service.update_by_id(beer_id, dto)), f"Beer {beer_id} not found")


@beers_app.command("patch")
def patch_beer(
    beer_id: str,
    name: str | None = typer.Option(None, "--name"),
    style: str | None = typer.Option(None, "--style"),
    upc: str | None = typer.Option(None, "--upc"),
    quantity: int | None = typer.Option(None, "--quantity", min=0),
    price: str | None = typer.Option(None, "--price"),
) -> None:
    """Change only the given fields of a beer."""

    service = get_container().beer_service
    dto = _build_dto(
        lambda: BeerDTO(
            beer_name=name, beer_style=style, upc=upc, quantity_on_hand=quantity, price=price
        )
    )
    _echo_dto(_run(lambda: service.patch_by_id(beer_id, dto)), f"Beer {beer_id} not found")


@beers_app.command("delete")
def delete_beer(beer_id: str) -> None:
    """Delete a beer. Unknown ids are ignored."""

    service = get_container().beer_service
    _run(lambda: service.delete_by_id(beer_id))
    typer.echo(f"Deleted beer {beer_id}")


# ------------------------------------------------------------- customers

_CUSTOMER_COLUMNS = ("customer_name", "last_modified_date")


@customers_app.command("list")
def list_customers() -> None:
    """List every customer."""

    service = get_container().customer_service
    _print_table("Customers", _CUSTOMER_COLUMNS, _run(lambda: _collect(service)))


@customers_app.command("get")
def get_customer(customer_id: str) -> None:
    """Show one customer."""

    service = get_container().customer_service
    _echo_dto(_run(lambda: service.get_by_id(customer_id)), f"Customer {customer_id} not found")


@customers_app.command("find")
def find_customer(name: str) -> None:
    """Show the first customer whose name matches exactly."""

    service = get_container().customer_service
    _echo_dto(_run(lambda: service.find_first_by_name(name)), f"No customer named {name!r}")


@customers_app.command("create")
def create_customer(name: str = typer.Option(..., "--name")) -> None:
    """Create a customer."""

    service = get_container().customer_service
    dto = _build_dto(lambda: CustomerDTO(customer_name=name))
    saved = _run(lambda: service.save(dto))
    typer.echo(f"Created customer {saved.id}")


@customers_app.command("update")
def update_customer(customer_id: str, name: str = typer.Option(..., "--name")) -> None:
    """Replace a customer's fields."""

    service = get_container().customer_service
    dto = _build_dto(lambda: CustomerDTO(customer_name=name))
    _echo_dto(
        _run(lambda: service.update_by_id(customer_id, dto)),
        f"Customer {customer_id} not found",
    )


@customers_app.command("patch")
def patch_customer(customer_id: str, name: str | None = typer.Option(None, "--name")) -> None:
    """Change only the given fields of a customer."""

    service = get_container().customer_service
    dto = _build_dto(lambda: CustomerDTO(customer_name=name))
    _echo_dto(
        _run(lambda: service.patch_by_id(customer_id, dto)),
        f"Customer {customer_id} not found",
    )


@customers_app.command("delete")
def delete_customer(customer_id: str) -> None:
    """Delete a customer. Unknown ids are ignored."""

    service = get_container().customer_service
    _run(lambda: service.delete_by_id(customer_id))
    typer.echo(f"Deleted customer {customer_id}")


__all__ = ["app"]
