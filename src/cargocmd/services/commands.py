"""CommandService — manifest lookup for the ``cmd`` and ``list`` commands.

Every failure is detected here, before any subprocess is spawned, and is
returned as a failed :class:`ServiceResult` rather than raised.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cargocmd.config.discovery import read_manifest
from cargocmd.domain.errors import CargoCmdError
from cargocmd.domain.manifest import CommandTable, Manifest, resolve_command_set
from cargocmd.services.result import ServiceResult

if TYPE_CHECKING:
    from cargocmd.config.settings import CmdSettings

logger = logging.getLogger(__name__)


class CommandService:
    """Reads the manifest named by *settings* and answers command lookups."""

    def __init__(self, settings: CmdSettings) -> None:
        self._settings = settings

    def _load_table(self) -> CommandTable:
        text = read_manifest(self._settings.manifest)
        table = Manifest.from_toml(text).command_table().require()
        logger.debug("Found %d commands in [%s]", len(table.commands), table.scope)
        return table

    def resolve(self, command: str) -> ServiceResult:
        """Resolve *command* and its hooks.

        On success ``data["commands"]`` is the ordered list of
        ``{"name", "command"}`` entries and ``data["scope"]`` the table scope.
        """
        op = "resolve"
        try:
            table = self._load_table()
            command_set = resolve_command_set(table, command)
        except CargoCmdError as exc:
            logger.debug("Resolution failed: %s", exc)
            return ServiceResult.failure(op, exc, command=command)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "scope": str(table.scope),
                "commands": [entry._asdict() for entry in command_set],
            },
        )

    def list_commands(self) -> ServiceResult:
        """Return every entry of the commands table, sorted by name."""
        op = "list_commands"
        try:
            table = self._load_table()
        except CargoCmdError as exc:
            return ServiceResult.failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={"scope": str(table.scope), "commands": dict(sorted(table.commands.items()))},
        )
