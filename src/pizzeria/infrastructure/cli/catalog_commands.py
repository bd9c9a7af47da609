"""CLI command listing the option catalogs."""

from __future__ import annotations

import click

from pizzeria.application.show_catalog import ShowCatalogHandler


@click.command("catalog")
def catalog() -> None:
    """List every size, type and extra ingredient with its price."""
    sections = ShowCatalogHandler().handle()

    click.echo(f"{'Group':<8} {'Name':<12} {'Price':>8}")
    click.echo("-" * 30)
    for label, options in sections.items():
        for option in options:
            click.echo(f"{label:<8} {option.name:<12} {option.price:>8}")
