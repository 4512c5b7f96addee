"""Shared pytest fixtures and test helpers for cargo-cmd tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ``CARGO_CMD_*`` variables from the outer shell out of tests."""
    import os

    for key in list(os.environ):
        if key.startswith("CARGO_CMD_"):
            monkeypatch.delenv(key)


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty crate directory set as CWD. Tests write their own Cargo.toml."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def write_manifest(root: Path, commands: dict[str, str], *, scope: str = "package") -> Path:
    """Write a Cargo.toml with *commands* under ``[<scope>.metadata.commands]``."""
    if scope == "package":
        header = '[package]\nname = "demo"\nversion = "0.1.0"\n'
    else:
        header = '[workspace]\nmembers = ["demo"]\n'
    body = "".join(f"{name} = {_toml_string(value)}\n" for name, value in commands.items())
    path = root / "Cargo.toml"
    path.write_text(f"{header}\n[{scope}.metadata.commands]\n{body}", encoding="utf-8")
    return path


def _toml_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
