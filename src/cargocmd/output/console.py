"""Rich Console factory and theme for cargo-cmd progress output.

The console writes to whatever ``sys.stdout`` is at print time, so child
processes that inherit file descriptor 1 and Click's test runner both see
the lines in order. In non-TTY environments Rich disables color codes.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

CMD_THEME = Theme(
    {
        "cmd.label": "bold cyan",
        "cmd.prompt": "dim",
        "cmd.line": "bold",
        "cmd.scope": "dim",
        "cmd.name": "green",
    }
)


def create_console(*, no_color: bool = False) -> Console:
    """Create a stdout Console that never reinterprets user command text.

    Markup, highlighting and wrapping are off: command strings may contain
    brackets and must be echoed exactly as they will be run.
    """
    return Console(
        theme=CMD_THEME,
        no_color=no_color,
        markup=False,
        highlight=False,
        soft_wrap=True,
        emoji=False,
    )


def phase_label(name: str) -> Text:
    """``[name]`` heading printed before each phase of a multi-phase run."""
    return Text(f"[{name}]", style="cmd.label")


def command_echo(line: str) -> Text:
    """``> line`` echo printed before each subprocess."""
    text = Text("> ", style="cmd.prompt")
    text.append(line, style="cmd.line")
    return text
