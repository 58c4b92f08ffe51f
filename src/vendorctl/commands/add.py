"""Command: register remote modules in the manifest."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from vendorctl.commands._base import VendorCommand

if TYPE_CHECKING:
    from vendorctl.commands._context import AppContext


@click.command(
    cls=VendorCommand,
    examples="""\
  vendorctl add https://deno.land/std@v0.50.0
  vendorctl add https://deno.land/std@v0.50.0 https://deno.land/x/oak@v4.0.0""",
)
@click.argument("urls", nargs=-1, required=True)
@click.pass_obj
def add(app: AppContext, urls: tuple[str, ...]) -> None:
    """Add modules given as PROTOCOL://PATH@VERSION URLs.

    Nothing is downloaded until files are linked with 'vendorctl link'.
    """
    from vendorctl.services.vendor import VendorService

    app.emit(VendorService(app.workspace).add(urls))
