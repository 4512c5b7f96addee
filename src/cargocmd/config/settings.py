"""Unified settings: CLI flags and environment variables in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``CARGO_CMD_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings

from cargocmd.config.discovery import find_manifest


class CmdSettings(BaseSettings):
    """Settings for a single cargo-cmd invocation.

    Attributes:
        cwd: Directory the manifest is looked up in.
        manifest_path: Explicit manifest override, or None for ``<cwd>/Cargo.toml``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CARGO_CMD_",
    }

    cwd: Path = Field(default_factory=Path.cwd)
    manifest_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, *, manifest_path: str | None = None, **cli_flags: Any) -> CmdSettings:
        """Construct settings from CLI flags.

        Flags left unset fall through to the environment and defaults.
        """
        overrides = {key: value for key, value in cli_flags.items() if value}
        if manifest_path:
            overrides["manifest_path"] = Path(manifest_path)
        return cls(**overrides)

    @property
    def manifest(self) -> Path:
        """The manifest file this invocation reads."""
        return find_manifest(self.manifest_path, self.cwd)
