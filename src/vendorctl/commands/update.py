"""Command: re-pin modules to a new version."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from vendorctl.commands._base import VendorCommand

if TYPE_CHECKING:
    from vendorctl.commands._context import AppContext


@click.command(
    cls=VendorCommand,
    examples="""\
  vendorctl update https://deno.land/std@v0.51.0""",
)
@click.argument("urls", nargs=-1, required=True)
@click.pass_obj
def update(app: AppContext, urls: tuple[str, ...]) -> None:
    """Set each module to the version in its URL and relink its files."""
    from vendorctl.services.vendor import VendorService

    app.emit(VendorService(app.workspace).update(urls))
