"""Root CLI group for cargo-cmd with global flags and command registration.

cargo dispatches ``cargo cmd <name>`` to ``cargo-cmd cmd <name>``, so the
root group is named after the binary and ``cmd`` is its subcommand.
"""

from __future__ import annotations

import click

from cargocmd import __version__
from cargocmd.commands import register_commands
from cargocmd.commands._context import AppContext
from cargocmd.config.settings import CmdSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="cargo-cmd")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Do not echo labels and command lines.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "--manifest-path",
    default=None,
    metavar="PATH",
    help="Path to Cargo.toml (default: ./Cargo.toml).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    manifest_path: str | None,
) -> None:
    """cargo-cmd — run custom commands from Cargo.toml."""
    settings = CmdSettings.from_cli(
        manifest_path=manifest_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)


def main() -> None:
    """Console-script entry point."""
    cli(prog_name="cargo-cmd")
