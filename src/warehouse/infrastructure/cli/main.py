from pathlib import Path

import click

from warehouse.infrastructure.bootstrap import (
    DEFAULT_DATA_DIR,
    DEFAULT_LOG_LEVEL,
    Settings,
    configure_logging,
)
from warehouse.infrastructure.cli.inventory_commands import (
    inventory_order,
    inventory_restock,
    inventory_ship,
)
from warehouse.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_show,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    show_default=True,
    envvar="WAREHOUSE_DATA_DIR",
    help="Directory holding products.json.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    envvar="WAREHOUSE_LOG_LEVEL",
    help="Logging verbosity.",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, log_level: str) -> None:
    """Warehouse — inventory tracking"""
    settings = Settings(data_dir=data_dir, log_level=log_level)
    configure_logging(settings)
    ctx.obj = settings


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def inventory() -> None:
    """Reserve, ship and restock stock."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_show)
inventory.add_command(inventory_order)
inventory.add_command(inventory_restock)
inventory.add_command(inventory_ship)
