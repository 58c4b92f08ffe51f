"""Commands: create and remove local import aliases."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from vendorctl.commands._base import VendorCommand

if TYPE_CHECKING:
    from vendorctl.commands._context import AppContext


@click.command(
    cls=VendorCommand,
    examples="""\
  vendorctl alias https://deno.land/std@v0.50.0/path/mod.ts path.ts
  vendorctl alias https://deno.land/x/oak@v4.0.0/mod.ts lib/oak.ts""",
)
@click.argument("target")
@click.argument("alias_path")
@click.pass_obj
def alias(app: AppContext, target: str, alias_path: str) -> None:
    """Create ALIAS_PATH re-exporting the module file TARGET."""
    from vendorctl.services.vendor import VendorService

    app.emit(VendorService(app.workspace).alias(target, alias_path))


@click.command(
    cls=VendorCommand,
    examples="""\
  vendorctl unalias path.ts""",
)
@click.argument("alias_paths", nargs=-1, required=True)
@click.pass_obj
def unalias(app: AppContext, alias_paths: tuple[str, ...]) -> None:
    """Remove alias files."""
    from vendorctl.services.vendor import VendorService

    app.emit(VendorService(app.workspace).unalias(alias_paths))
