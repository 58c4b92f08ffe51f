"""Command: list vendored modules and aliases."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from vendorctl.commands._base import VendorCommand

if TYPE_CHECKING:
    from vendorctl.commands._context import AppContext


@click.command(
    cls=VendorCommand,
    examples="""\
  vendorctl show
  vendorctl --json show
  vendorctl -q show""",
)
@click.pass_obj
def show(app: AppContext) -> None:
    """Show modules, linked files, and aliases from the manifest."""
    from vendorctl.services.vendor import VendorService

    app.emit(VendorService(app.workspace).show())
