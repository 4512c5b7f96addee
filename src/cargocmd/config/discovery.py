"""Manifest discovery and loading.

cargo runs external subcommands from the crate directory, so the manifest
is ``Cargo.toml`` in the current working directory unless an explicit path
is given with ``--manifest-path`` or ``CARGO_CMD_MANIFEST_PATH``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from cargocmd.domain.errors import ManifestReadError

MANIFEST_FILENAME = "Cargo.toml"

logger = logging.getLogger(__name__)


def find_manifest(manifest_path: Path | None = None, cwd: Path | None = None) -> Path:
    """Return the manifest location: *manifest_path* if given, else ``<cwd>/Cargo.toml``.

    The path is not checked for existence; :func:`read_manifest` does that.
    """
    if manifest_path is not None:
        return manifest_path
    return (cwd or Path.cwd()) / MANIFEST_FILENAME


def read_manifest(path: Path) -> str:
    """Read the manifest text.

    Raises:
        ManifestReadError: The file is missing, is a directory, or is unreadable.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        msg = f"Could not find or open {path.name} in {path.parent}"
        raise ManifestReadError(msg) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestReadError(f"Could not read the contents of {path}: {exc}") from exc
    logger.debug("Read manifest %s (%d bytes)", path, len(text))
    return text
