"""Sequenced execution of a resolved command set.

Each entry runs as a shell-interpreted child process that inherits
stdin/stdout/stderr. The sequence stops at the first failing entry and
that entry's exit code becomes the exit code of cargo-cmd itself.
"""

from __future__ import annotations

import logging
import signal
import subprocess
import threading
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

from cargocmd.output.console import command_echo, create_console, phase_label

if TYPE_CHECKING:
    from rich.console import Console

    from cargocmd.domain.manifest import NamedCommand

logger = logging.getLogger(__name__)

# Exit code used when a child dies from a signal or cannot be launched.
GENERIC_FAILURE = 1


@dataclass(frozen=True)
class StepStatus:
    """How one child process ended: a normal exit code or a terminating signal."""

    exit_code: int | None = None
    signal: int | None = None

    @classmethod
    def from_returncode(cls, returncode: int) -> StepStatus:
        # subprocess reports death-by-signal N as -N on POSIX.
        if returncode < 0:
            return cls(signal=-returncode)
        return cls(exit_code=returncode)

    @property
    def success(self) -> bool:
        return self.exit_code == 0

    @property
    def process_exit_code(self) -> int:
        """Exit code to propagate: the child's own, or 1 for a signal."""
        if self.exit_code is None:
            return GENERIC_FAILURE
        return self.exit_code


def build_command_line(command: str, rest: Sequence[str]) -> str:
    """Append *rest* to *command*, space-joined and otherwise untouched.

    No quoting is applied; the shell performs word splitting.
    """
    return " ".join([command, *rest])


@contextmanager
def _interrupts_ignored() -> Iterator[None]:
    """Ignore SIGINT in this process until the block exits.

    Ctrl-C still reaches the child through the terminal's process group;
    the child decides how to stop and its exit status is what we report.
    Signal handlers can only be changed from the main thread.
    """
    if threading.current_thread() is not threading.main_thread():
        yield
        return
    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def run_step(line: str) -> StepStatus:
    """Run *line* through the platform shell and wait for it to finish."""
    try:
        # Spawn before ignoring SIGINT: an ignored disposition survives exec.
        process = subprocess.Popen(line, shell=True)
    except OSError as exc:
        logger.error("Failed to launch %r: %s", line, exc)
        return StepStatus(exit_code=GENERIC_FAILURE)
    with _interrupts_ignored():
        returncode = process.wait()
    status = StepStatus.from_returncode(returncode)
    logger.debug("Finished %r: exit_code=%s signal=%s", line, status.exit_code, status.signal)
    return status


def execute_command_set(
    commands: Sequence[NamedCommand],
    rest: Sequence[str] = (),
    *,
    console: Console | None = None,
    quiet: bool = False,
) -> int:
    """Run *commands* in order and return the exit code for the whole run.

    A ``[name]`` label precedes each phase when more than one phase runs,
    and ``> line`` echoes the exact line before it is spawned. Both are
    suppressed when *quiet* is set.
    """
    console = console or create_console()
    labelled = len(commands) > 1

    for name, command in commands:
        line = build_command_line(command, rest)
        if not quiet:
            if labelled:
                console.print()
                console.print(phase_label(name))
            console.print(command_echo(line))
            # The child writes straight to fd 1; our lines must land first.
            console.file.flush()

        logger.debug("Running %s", name)
        status = run_step(line)
        if not status.success:
            logger.debug("Stopping after %s failed", name)
            return status.process_exit_code

    return 0
