from pathlib import Path

import click

from ecommerce.infrastructure.bootstrap import DEFAULT_DATA_DIR, DEFAULT_LOG_LEVEL, Settings
from ecommerce.infrastructure.cli.cart_commands import cart_add, cart_remove, cart_show, cart_update
from ecommerce.infrastructure.cli.order_commands import (
    order_list,
    order_place,
    order_show,
    order_status,
)
from ecommerce.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from ecommerce.infrastructure.logging import configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    envvar="ECOMMERCE_DATA_DIR",
    show_default=True,
    help="Directory holding the JSON data files.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    envvar="ECOMMERCE_LOG_LEVEL",
    show_default=True,
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, log_level: str) -> None:
    """E-commerce shop — products, carts and orders"""
    configure_logging(log_level)
    ctx.obj = Settings(data_dir=data_dir, log_level=log_level.upper())


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def cart() -> None:
    """Manage a user's cart."""


@cli.group()
def order() -> None:
    """Place and manage orders."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
cart.add_command(cart_add)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
order.add_command(order_list)
order.add_command(order_place)
order.add_command(order_show)
order.add_command(order_status)
