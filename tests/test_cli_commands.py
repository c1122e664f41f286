from __future__ import annotations

import json
from collections.abc import Iterator

import pytest
from typer.testing import CliRunner

from brewstore.cli.app import app
from brewstore.cli.deps import reset_container


@pytest.fixture(autouse=True)
def _memory_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("BREWSTORE_STORE", "memory")
    monkeypatch.setenv("BREWSTORE_ENV", "test")
    monkeypatch.setenv("BREWSTORE_SEED_ON_START", "false")
    reset_container()
    yield
    reset_container()


def _create_beer(runner: CliRunner, *args: str) -> str:
    result = runner.invoke(app, ["beers", "create", *args])
    assert result.exit_code == 0, result.stdout
    return result.stdout.strip().split()[-1]


def test_cli_beer_lifecycle() -> None:
    runner = CliRunner()
    beer_id = _create_beer(
        runner,
        "--name",
        "Galaxy Cat",
        "--style",
        "Pale Ale",
        "--price",
        "12.99",
        "--quantity",
        "122",
    )

    fetched = runner.invoke(app, ["beers", "get", beer_id])
    assert fetched.exit_code == 0
    payload = json.loads(fetched.stdout)
    assert payload["beer_name"] == "Galaxy Cat"
    assert payload["price"] == "12.99"

    patched = runner.invoke(app, ["beers", "patch", beer_id, "--name", "New Name"])
    assert patched.exit_code == 0
    assert json.loads(patched.stdout)["price"] == "12.99"

    updated = runner.invoke(app, ["beers", "update", beer_id, "--name", "Newest"])
    assert updated.exit_code == 0
    assert json.loads(updated.stdout)["price"] == "0"

    found = runner.invoke(app, ["beers", "find", "Newest"])
    assert found.exit_code == 0
    assert json.loads(found.stdout)["id"] == beer_id

    deleted = runner.invoke(app, ["beers", "delete", beer_id])
    assert deleted.exit_code == 0
    missing = runner.invoke(app, ["beers", "get", beer_id])
    assert missing.exit_code == 1
    assert "not found" in missing.stdout


def test_cli_reports_service_errors() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["customers", "update", "nope", "--name", "Pepe"])
    assert result.exit_code == 1
    assert "Customer nope not found" in result.stdout

    blank = runner.invoke(app, ["customers", "create", "--name", "  "])
    assert blank.exit_code == 1
    assert "customer_name" in blank.stdout

    invalid = runner.invoke(app, ["beers", "create", "--name", "Crank", "--price=-3"])
    assert invalid.exit_code == 1
    assert "Invalid input" in invalid.stdout


def test_cli_seed_and_list() -> None:
    runner = CliRunner()

    seeded = runner.invoke(app, ["seed"])
    assert seeded.exit_code == 0
    assert "Loaded 3 beers and 3 customers" in seeded.stdout

    listed = runner.invoke(app, ["customers", "list"])
    assert listed.exit_code == 0
    for name in ("Miguel", "Pepe", "Maria"):
        assert name in listed.stdout


def test_cli_list_empty_and_show_settings() -> None:
    runner = CliRunner()

    empty = runner.invoke(app, ["beers", "list"])
    assert empty.exit_code == 0
    assert "No beers found" in empty.stdout

    settings = runner.invoke(app, ["show-settings"])
    assert settings.exit_code == 0
    assert "memory" in settings.stdout
