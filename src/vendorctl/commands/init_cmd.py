"""Command: workspace initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from vendorctl.commands._base import VendorCommand

if TYPE_CHECKING:
    from vendorctl.commands._context import AppContext


@click.command(
    "init",
    cls=VendorCommand,
    examples="""\
  vendorctl init
  vendorctl -c ./vendorctl.toml init""",
)
@click.pass_obj
def init_cmd(app: AppContext) -> None:
    """Create an empty manifest in the workspace root."""
    from vendorctl.services.vendor import VendorService

    app.emit(VendorService(app.workspace).init())
