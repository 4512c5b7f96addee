"""AppContext — shared Click context for all subcommands.

Created once by the root CLI group; subcommands receive it through
``@click.pass_obj``. Owns logging setup and result emission.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cargocmd.config.logging import configure_logging
from cargocmd.output.formatters import format_result

if TYPE_CHECKING:
    from cargocmd.config.settings import CmdSettings
    from cargocmd.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: CmdSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult) -> None:
        """Output a ServiceResult with correct exit semantics.

        * Success: writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, json_output=self.settings.json_output)
        if result.ok:
            click.echo(output)
            return
        self.fail(result)

    def fail(self, result: ServiceResult) -> None:
        """Report a failed result on stderr and exit with code 1."""
        click.echo(format_result(result, json_output=self.settings.json_output), err=True)
        raise SystemExit(1)
