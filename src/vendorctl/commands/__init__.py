"""Subcommand modules for vendorctl.

Provides register_commands() which uses deferred imports to keep
``vendorctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from vendorctl.commands.add import add
    from vendorctl.commands.alias import alias, unalias
    from vendorctl.commands.ensure import ensure
    from vendorctl.commands.init_cmd import init_cmd
    from vendorctl.commands.link import link, unlink
    from vendorctl.commands.remove import remove
    from vendorctl.commands.show import show
    from vendorctl.commands.update import update

    cli.add_command(init_cmd)
    cli.add_command(add)
    cli.add_command(remove)
    cli.add_command(link)
    cli.add_command(unlink)
    cli.add_command(alias)
    cli.add_command(unalias)
    cli.add_command(update)
    cli.add_command(ensure)
    cli.add_command(show)
