"""Command: remove modules and their vendor trees."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from vendorctl.commands._base import VendorCommand

if TYPE_CHECKING:
    from vendorctl.commands._context import AppContext


@click.command(
    cls=VendorCommand,
    examples="""\
  vendorctl remove https://deno.land/std
  vendorctl remove https://deno.land/std@v0.50.0""",
)
@click.argument("urls", nargs=-1, required=True)
@click.pass_obj
def remove(app: AppContext, urls: tuple[str, ...]) -> None:
    """Remove modules. Aliases pointing into them are kept."""
    from vendorctl.services.vendor import VendorService

    app.emit(VendorService(app.workspace).remove(urls))
