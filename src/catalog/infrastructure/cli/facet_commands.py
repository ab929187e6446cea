"""CLI commands for facet reference data (types, colors, materials, sizes)."""

from __future__ import annotations

import click

from catalog.domain.exceptions import DomainException
from catalog.domain.model.facet import FacetKind
from catalog.infrastructure.bootstrap import Container
from catalog.infrastructure.cli.output import success

_KIND_CHOICE = click.Choice([k.value for k in FacetKind])


@click.command("add")
@click.option("--kind", required=True, type=_KIND_CHOICE, help="Facet dimension.")
@click.option("--name", required=True, help="Display name.")
@click.option(
    "--code",
    required=True,
    help="Short code: type 2 letters, color/material 3 letters, size up to 3.",
)
@click.pass_obj
def facet_add(container: Container, kind: str, name: str, code: str) -> None:
    """Register a new facet value."""
    provider = container.reference_data()

    try:
        facet = provider.add(FacetKind(kind), name=name, code=code)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    success(f"{kind.capitalize()} #{facet.id} '{facet.name}' ({facet.code}) added")


@click.command("list")
@click.option("--kind", required=True, type=_KIND_CHOICE, help="Facet dimension.")
@click.pass_obj
def facet_list(container: Container, kind: str) -> None:
    """List the values of one facet dimension."""
    try:
        facets = container.reference_data().snapshot().list(FacetKind(kind))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not facets:
        click.echo(f"No {kind} values found.")
        return

    click.echo(f"{'ID':<6} {'Code':<6} {'Name':<30}")
    click.echo("-" * 44)
    for f in facets:
        click.echo(f"{f.id:<6} {f.code:<6} {f.name:<30}")
