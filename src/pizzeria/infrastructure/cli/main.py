import logging

import click

from pizzeria.infrastructure.cli.catalog_commands import catalog
from pizzeria.infrastructure.cli.pizza_commands import build, demo


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log every pizza change.")
def cli(verbose: bool) -> None:
    """Pizzeria: configure a pizza and see what it costs"""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("pizzeria").setLevel(level)


# Register subcommands
cli.add_command(catalog)
cli.add_command(build)
cli.add_command(demo)
