"""Command: run a manifest command with its pre/post hooks."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from cargocmd.commands._base import CmdCommand

if TYPE_CHECKING:
    from cargocmd.commands._context import AppContext

logger = logging.getLogger(__name__)


@click.command(
    "cmd",
    cls=CmdCommand,
    example_template="cargo cmd {name}",
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
    examples="""\
  cargo cmd test
  cargo cmd test --release -- --nocapture
  cargo-cmd --manifest-path crates/core/Cargo.toml cmd build""",
)
@click.argument("command")
@click.argument("rest", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def cmd(app: AppContext, command: str, rest: tuple[str, ...]) -> None:
    """Run COMMAND from [package.metadata.commands], plus pre/post hooks.

    REST is appended verbatim to every command line. A single ``--``
    directly after COMMAND only ends option parsing and is dropped.
    """
    from cargocmd.config.logging import bind_invocation
    from cargocmd.domain.manifest import NamedCommand
    from cargocmd.services.commands import CommandService
    from cargocmd.services.execute import execute_command_set

    if rest[:1] == ("--",):
        rest = rest[1:]

    bind_invocation(command, str(app.settings.manifest))
    result = CommandService(app.settings).resolve(command)
    if not result.ok:
        app.fail(result)

    commands = [NamedCommand(**entry) for entry in result.data["commands"]]
    logger.debug("Resolved %s", ", ".join(entry.name for entry in commands))
    exit_code = execute_command_set(commands, rest, quiet=app.settings.quiet)
    click.get_current_context().exit(exit_code)
