import logging

import click

from pos.infrastructure.cli.catalog_commands import catalog_list
from pos.infrastructure.cli.checkout_commands import checkout, demo
from pos.infrastructure.config import get_settings

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging verbosity (defaults to POS_LOG_LEVEL).",
)
def cli(log_level: str | None) -> None:
    """POS — point-of-sale checkout"""
    level = (log_level or get_settings().log_level).upper()
    logging.basicConfig(
        level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


# Register subcommands
cli.add_command(catalog_list)
cli.add_command(checkout)
cli.add_command(demo)
