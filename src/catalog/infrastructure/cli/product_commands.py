"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from catalog.domain.exceptions import DomainException
from catalog.domain.service.catalog_filter import FilterCriteria
from catalog.infrastructure.bootstrap import Container
from catalog.infrastructure.cli.output import collect_facet_ids, facet_options, success


@click.command("add")
@click.option("--code", required=True, help="Product code (unique).")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Initial sale price (e.g. 15.00).")
@click.option("--note", default="", help="Free-text note.")
@facet_options
@click.pass_obj
def product_add(
    container: Container, code: str, name: str, price: str, note: str, **facets: str | None
) -> None:
    """Add a new product to the catalog."""
    handler = container.add_product()

    try:
        product = handler.handle(
            code=code,
            name=name,
            price=price,
            note=note,
            facet_ids=collect_facet_ids(**facets),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    success(
        f"Product #{product.id} {product.code} '{product.name}' added at "
        f"{product.current_price()}"
    )


@click.command("list")
@click.option("--search", default="", help="Text to find in code, name or note.")
@facet_options
@click.option("--page", default=1, type=int, show_default=True, help="Page number.")
@click.pass_obj
def product_list(container: Container, search: str, page: int, **facets: str | None) -> None:
    """List catalog products, optionally filtered."""
    criteria = FilterCriteria(search=search, **facets)
    handler = container.list_products()

    try:
        result = handler.handle(criteria, page=page)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.items:
        click.echo("No products found.")
        return

    click.echo(
        f"{'ID':<5} {'Code':<10} {'Name':<30} {'Type':<12} {'Color':<12} "
        f"{'Material':<12} {'Size':<8} {'Price':>12} {'Stock':>6}"
    )
    click.echo("-" * 114)
    for p in result.items:
        click.echo(
            f"{p.id:<5} {p.code:<10} {p.name:<30} {p.product_type or '-':<12} "
            f"{p.color or '-':<12} {p.material or '-':<12} {p.size or '-':<8} "
            f"{p.price:>12} {p.stock:>6}"
        )
    click.echo()
    more = "  (more: --page {})".format(result.page + 1) if result.has_more else ""
    click.echo(f"Page {result.page} - {result.total} product(s){more}")


@click.command("edit")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--note", default=None, help="New note (empty string clears it).")
@facet_options
@click.pass_obj
def product_edit(
    container: Container,
    product_id: str,
    name: str | None,
    note: str | None,
    **facets: str | None,
) -> None:
    """Edit a product's details (use an empty facet id to clear it).

    The price is changed with 'catalog price set'.
    """
    handler = container.update_product()

    try:
        handler.handle(
            product_id=product_id,
            name=name,
            note=note,
            facet_ids=collect_facet_ids(**facets),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    success(f"Product #{product_id} updated")


@click.command("stock")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.pass_obj
def product_stock(container: Container, product_id: str, quantity: int) -> None:
    """Record the stock figure reported by inventory."""
    handler = container.set_stock()

    try:
        handler.handle(product_id=product_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    success(f"Stock for product #{product_id} set to {quantity}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--yes", is_flag=True, default=False, help="Skip the confirmation prompt.")
@click.pass_obj
def product_delete(container: Container, product_id: str, yes: bool) -> None:
    """Delete a product. Stock must be 0 and it must not be in use."""
    handler = container.delete_product()

    try:
        decision = handler.check(product_id)
        if not decision.allowed:
            raise click.ClickException(
                f"Product #{product_id} cannot be deleted: {decision.describe()}"
            )

        if not yes:
            click.confirm(f"Delete product #{product_id}?", abort=True)

        decision = handler.commit(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not decision.allowed:
        raise click.ClickException(
            f"Product #{product_id} cannot be deleted: {decision.describe()}"
        )
    success(f"Product #{product_id} deleted")
