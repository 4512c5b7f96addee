"""Exception taxonomy for manifest loading and command resolution.

Every error here is raised before any subprocess is spawned. Each carries
a stable ``code`` that the service layer copies into ``ServiceError``.
"""

from __future__ import annotations


class CargoCmdError(Exception):
    """Base class for all cargo-cmd failures."""

    code = "CARGO_CMD_ERROR"


class ManifestReadError(CargoCmdError, OSError):
    """The manifest file is missing or cannot be read."""

    code = "MANIFEST_NOT_FOUND"


class ManifestParseError(CargoCmdError):
    """The manifest is not valid TOML."""

    code = "INVALID_TOML"


class SchemaError(CargoCmdError):
    """No usable ``[package|workspace].metadata.commands`` table."""

    code = "NO_COMMANDS"


class CommandNotFoundError(CargoCmdError):
    """The requested command has no direct entry in the commands table."""

    code = "COMMAND_NOT_FOUND"

    def __init__(self, command: str) -> None:
        super().__init__(f'Command "{command}" not found in Cargo.toml')
        self.command = command
