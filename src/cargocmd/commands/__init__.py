"""Subcommand modules for cargo-cmd.

register_commands() uses deferred imports to keep ``cargo-cmd --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the subcommands on the root CLI group."""
    from cargocmd.commands.cmd import cmd
    from cargocmd.commands.list_cmd import list_cmd

    cli.add_command(cmd)
    cli.add_command(list_cmd)
