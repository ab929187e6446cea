"""Shared console output for CLI commands.

Success messages go to stdout in green. Failures are raised as
``click.ClickException`` and printed by click on stderr, so a successful
action is never reported on the error channel.
"""

from __future__ import annotations

import click

from catalog.domain.model.facet import FacetKind

FACET_OPTIONS = {
    FacetKind.TYPE: "type_id",
    FacetKind.COLOR: "color_id",
    FacetKind.MATERIAL: "material_id",
    FacetKind.SIZE: "size_id",
}


def success(message: str) -> None:
    click.secho(message, fg="green")


def facet_options(func):
    """Add ``--type/--color/--material/--size`` id options to a command."""
    for kind, dest in reversed(FACET_OPTIONS.items()):
        func = click.option(
            f"--{kind.value}", dest, default=None, help=f"{kind.value.capitalize()} id."
        )(func)
    return func


def collect_facet_ids(**options: str | None) -> dict[FacetKind, str | None]:
    """Keep only the facet options the user actually passed."""
    return {
        kind: options[dest]
        for kind, dest in FACET_OPTIONS.items()
        if options.get(dest) is not None
    }
