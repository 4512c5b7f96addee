"""Click Command subclass with an ``--examples`` flag.

Static examples are printed first. Commands built with an
``example_template`` also get one line per runnable command in the
current ``Cargo.toml``, so ``cargo cmd cmd --examples`` shows what this
project actually offers.
"""

from __future__ import annotations

from typing import Any

import click

from cargocmd.commands._context import AppContext


def runnable_names(commands: dict[str, str]) -> list[str]:
    """Names worth invoking directly: hooks of an existing command are left out."""
    names = []
    for name in sorted(commands):
        base = name.removeprefix("pre") if name.startswith("pre") else name.removeprefix("post")
        if base != name and base in commands:
            continue
        names.append(name)
    return names


class CmdCommand(click.Command):
    """Click Command that accepts ``examples`` and ``example_template`` keywords."""

    def __init__(
        self,
        *args: Any,
        examples: str | None = None,
        example_template: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        self.example_template = example_template
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples, including this project's commands.",
                )
            )

    def _manifest_examples(self, ctx: click.Context) -> list[str]:
        app = ctx.find_object(AppContext)
        if self.example_template is None or app is None:
            return []
        from cargocmd.services.commands import CommandService

        result = CommandService(app.settings).list_commands()
        if not result.ok:
            return []
        names = runnable_names(result.data["commands"])
        return [f"  {self.example_template.format(name=name)}" for name in names]

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        project_lines = self._manifest_examples(ctx)
        if project_lines:
            click.echo("\nCommands in this project's Cargo.toml:\n")
            click.echo("\n".join(project_lines))
        ctx.exit(0)
