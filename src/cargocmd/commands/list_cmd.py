"""Command: show the commands table."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cargocmd.commands._base import CmdCommand

if TYPE_CHECKING:
    from cargocmd.commands._context import AppContext


@click.command(
    "list",
    cls=CmdCommand,
    examples="""\
  cargo cmd list
  cargo-cmd --json list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List the commands defined in Cargo.toml."""
    from cargocmd.services.commands import CommandService

    app.emit(CommandService(app.settings).list_commands())
