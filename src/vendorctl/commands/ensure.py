"""Command: rewrite the vendor tree from the manifest."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from vendorctl.commands._base import VendorCommand

if TYPE_CHECKING:
    from vendorctl.commands._context import AppContext


@click.command(
    cls=VendorCommand,
    examples="""\
  vendorctl ensure
  vendorctl --verbose ensure""",
)
@click.pass_obj
def ensure(app: AppContext) -> None:
    """Recreate every link and alias file listed in the manifest.

    Run after a clone, or after a batch that failed halfway.
    """
    from vendorctl.services.vendor import VendorService

    app.emit(VendorService(app.workspace).ensure())
