"""Commands: link and unlink module files."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from vendorctl.commands._base import VendorCommand

if TYPE_CHECKING:
    from vendorctl.commands._context import AppContext


@click.command(
    cls=VendorCommand,
    examples="""\
  vendorctl link https://deno.land/std@v0.50.0/path/mod.ts
  vendorctl link https://deno.land/std@v0.50.0/fs/mod.ts https://deno.land/std@v0.50.0/uuid/mod.ts""",
)
@click.argument("links", nargs=-1, required=True)
@click.pass_obj
def link(app: AppContext, links: tuple[str, ...]) -> None:
    """Link module files into the vendor directory.

    Each LINK is a module URL followed by a file path. The module must
    have been added first.
    """
    from vendorctl.services.vendor import VendorService

    app.emit(VendorService(app.workspace).link(links))


@click.command(
    cls=VendorCommand,
    examples="""\
  vendorctl unlink https://deno.land/std@v0.50.0/path/mod.ts""",
)
@click.argument("links", nargs=-1, required=True)
@click.pass_obj
def unlink(app: AppContext, links: tuple[str, ...]) -> None:
    """Remove linked module files from the vendor directory."""
    from vendorctl.services.vendor import VendorService

    app.emit(VendorService(app.workspace).unlink(links))
