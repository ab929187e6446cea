import click
from pydantic import ValidationError as SettingsError

from catalog.infrastructure.bootstrap import Container
from catalog.infrastructure.cli.facet_commands import facet_add, facet_list
from catalog.infrastructure.cli.price_commands import price_history, price_set
from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_edit,
    product_list,
    product_stock,
)
from catalog.infrastructure.config import Settings
from catalog.infrastructure.log_config import configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Product Catalog — products, prices and safe deletion"""
    try:
        settings = Settings()
    except SettingsError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}")

    configure_logging(settings.log_level)
    ctx.obj = Container(settings)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def price() -> None:
    """Change prices and inspect price history."""


@cli.group()
def facet() -> None:
    """Manage facet reference data."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_edit)
product.add_command(product_list)
product.add_command(product_stock)
price.add_command(price_history)
price.add_command(price_set)
facet.add_command(facet_add)
facet.add_command(facet_list)
