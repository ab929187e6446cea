"""CLI commands for product prices."""

from __future__ import annotations

import click

from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import Container
from catalog.infrastructure.cli.output import success


@click.command("set")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.option("--reason", default=None, help="Why the price changed.")
@click.pass_obj
def price_set(
    container: Container, product_id: str, price: str, reason: str | None
) -> None:
    """Change a product's price (earlier prices are kept in its history)."""
    handler = container.change_price()

    try:
        entry = handler.handle(product_id=product_id, new_price=price, reason=reason)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    success(f"Product #{product_id} price updated to {entry.value}")


@click.command("history")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def price_history(container: Container, product_id: str) -> None:
    """Show every price a product has had, oldest first."""
    handler = container.price_history()

    try:
        rows = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"  {'Date':<20} {'Previous':>12} {'New':>12}  Reason")
    click.echo(f"  {'-'*64}")
    for row in rows:
        click.echo(
            f"  {row.effective_at:<20} {row.previous or '-':>12} {row.new:>12}  "
            f"{row.reason or ''}"
        )
