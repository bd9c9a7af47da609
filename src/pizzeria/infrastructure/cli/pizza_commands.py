"""CLI commands for the Pizza aggregate."""

from __future__ import annotations

import click

from pizzeria.application.build_pizza import BuildPizzaHandler
from pizzeria.domain.exceptions import DomainException
from pizzeria.domain.model.catalog import (
    EXTRA_CHEESE,
    EXTRA_MEAT,
    EXTRA_TOMATOES,
    SIZE_L,
    SIZE_S,
    TYPE_VEGGIE,
)
from pizzeria.domain.model.pizza import Pizza


@click.command("build")
@click.option("--size", required=True, help="Size name (e.g. SMALL).")
@click.option("--type", "type_", required=True, help="Type name (e.g. VEGGIE).")
@click.option("--extra", "extras", multiple=True, help="Extra ingredient; repeatable.")
def build(size: str, type_: str, extras: tuple[str, ...]) -> None:
    """Build a pizza and print its price and description."""
    handler = BuildPizzaHandler()

    try:
        dto = handler.handle(size=size, type_=type_, extras=list(extras))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Price: {dto.price}")
    click.echo(dto.info)


@click.command("demo")
def demo() -> None:
    """Walk through a small veggie pizza, adding and removing extras."""
    pizza = Pizza.create(SIZE_S, TYPE_VEGGIE)
    pizza.add_extra_ingredient(EXTRA_MEAT)
    click.echo(f"Price: {pizza.price}")

    pizza.add_extra_ingredient(EXTRA_CHEESE)
    pizza.add_extra_ingredient(EXTRA_TOMATOES)
    click.echo(f"Price with extra ingredients: {pizza.price}")
    click.echo(f"Is pizza large: {pizza.size == SIZE_L}")

    pizza.remove_extra_ingredient(EXTRA_CHEESE)
    click.echo(f"Extra ingredients: {len(pizza.extra_ingredients)}")
    click.echo(pizza.info)
