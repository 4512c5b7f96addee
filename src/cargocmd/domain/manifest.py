"""Manifest shape and command resolution.

Commands live in one of two places in ``Cargo.toml``::

    [package.metadata.commands]        # a regular crate
    [workspace.metadata.commands]      # a virtual workspace root

Only the ``commands`` tables are modelled; every other key in the manifest
is ignored. The location is reported as a :class:`CommandScope` so callers
never have to juggle two independent optionals.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, NamedTuple

from pydantic import BaseModel, ValidationError

from cargocmd.domain.errors import CommandNotFoundError, ManifestParseError, SchemaError

NO_COMMANDS_MESSAGE = "Could not find commands in Cargo.toml"


class CommandScope(StrEnum):
    """Where in the manifest the commands table was found."""

    PACKAGE = "package"
    WORKSPACE = "workspace"
    NEITHER = "neither"


# --- Manifest models ---


class MetadataSection(BaseModel):
    """``[<scope>.metadata]`` section."""

    model_config = {"frozen": True, "extra": "ignore"}

    commands: dict[str, str] | None = None


class ScopeSection(BaseModel):
    """``[package]`` or ``[workspace]`` section."""

    model_config = {"frozen": True, "extra": "ignore"}

    metadata: MetadataSection | None = None

    @property
    def commands(self) -> dict[str, str] | None:
        return self.metadata.commands if self.metadata else None


class Manifest(BaseModel):
    """The parts of ``Cargo.toml`` that cargo-cmd reads."""

    model_config = {"frozen": True, "extra": "ignore"}

    package: ScopeSection | None = None
    workspace: ScopeSection | None = None

    @classmethod
    def from_toml(cls, text: str) -> Manifest:
        """Parse manifest text.

        Raises:
            ManifestParseError: The text is not valid TOML.
            SchemaError: A commands table exists but is not a string mapping.
        """
        try:
            data: dict[str, Any] = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ManifestParseError(f"Invalid TOML in Cargo.toml: {exc}") from exc
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            first = exc.errors()[0]
            where = ".".join(str(part) for part in first["loc"])
            raise SchemaError(f"{NO_COMMANDS_MESSAGE} ({where}: {first['msg']})") from exc

    def command_table(self) -> CommandTable:
        """Return the populated commands table, tagged with its scope.

        A manifest with no commands table yields a ``NEITHER``-tagged empty
        table; callers that need commands go through :meth:`CommandTable.require`.

        Raises:
            SchemaError: Both scopes define a commands table.
        """
        package = self.package.commands if self.package else None
        workspace = self.workspace.commands if self.workspace else None

        if package is not None and workspace is not None:
            raise SchemaError(
                "Both [package.metadata.commands] and [workspace.metadata.commands]"
                " are defined in Cargo.toml; keep only one"
            )
        if package is not None:
            return CommandTable(CommandScope.PACKAGE, package)
        if workspace is not None:
            return CommandTable(CommandScope.WORKSPACE, workspace)
        return CommandTable(CommandScope.NEITHER, {})


@dataclass(frozen=True)
class CommandTable:
    """A commands mapping tagged with the scope it was read from."""

    scope: CommandScope
    commands: dict[str, str]

    def require(self) -> CommandTable:
        """Return self, or raise :class:`SchemaError` for a ``NEITHER`` table."""
        if self.scope is CommandScope.NEITHER:
            raise SchemaError(NO_COMMANDS_MESSAGE)
        return self


# --- Resolution ---


class NamedCommand(NamedTuple):
    """One ``(name, shell command)`` entry of a command set."""

    name: str
    command: str


CommandSet = list[NamedCommand]


def hook_names(command: str) -> tuple[str, str, str]:
    """Return the ``(pre, main, post)`` names for *command*, in run order."""
    return f"pre{command}", command, f"post{command}"


def resolve_command_set(table: CommandTable, command: str) -> CommandSet:
    """Build the ordered command set for *command*.

    ``pre<command>`` and ``post<command>`` are optional hooks; ``<command>``
    itself is mandatory even when hooks exist.

    Raises:
        SchemaError: *table* is the ``NEITHER`` placeholder.
        CommandNotFoundError: *command* has no entry in the table.
    """
    commands = table.require().commands
    resolved: CommandSet = []
    for name in hook_names(command):
        value = commands.get(name)
        if value is None:
            if name == command:
                raise CommandNotFoundError(command)
            continue
        resolved.append(NamedCommand(name, value))
    return resolved


def resolve_from_text(text: str, command: str) -> CommandSet:
    """Parse manifest *text* and resolve *command* in one step."""
    return resolve_command_set(Manifest.from_toml(text).command_table(), command)
