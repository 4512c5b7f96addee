"""Tests for result formatting."""

from __future__ import annotations

import json
import tomllib

from cargocmd.domain.errors import CommandNotFoundError
from cargocmd.output.formatters import format_result, toml_key, toml_string
from cargocmd.services.result import ServiceResult


class TestTomlString:
    def test_plain(self) -> None:
        assert toml_string("cargo test") == '"cargo test"'

    def test_quotes_and_backslashes(self) -> None:
        assert toml_string('echo "a\\b"') == '"echo \\"a\\\\b\\""'

    def test_control_characters(self) -> None:
        assert toml_string("a\nb\x1b") == '"a\\nb\\u001B"'

    def test_key(self) -> None:
        assert toml_key("build-docs") == "build-docs"
        assert toml_key("ci.lint") == '"ci.lint"'


class TestFormatResult:
    def test_list_output_is_valid_toml(self) -> None:
        commands = {
            "greet": 'echo "hi there"',
            "win": "dir C:\\Users",
            "ci.lint": "cargo clippy\t--all",
        }
        result = ServiceResult(
            ok=True, op="list_commands", data={"scope": "package", "commands": commands}
        )
        parsed = tomllib.loads(format_result(result))
        assert parsed["package"]["metadata"]["commands"] == commands

    def test_error_human(self) -> None:
        result = ServiceResult.failure("resolve", CommandNotFoundError("x"))
        assert format_result(result) == 'ERROR: resolve - Command "x" not found in Cargo.toml'

    def test_error_json(self) -> None:
        result = ServiceResult.failure("resolve", CommandNotFoundError("x"))
        assert json.loads(format_result(result, json_output=True))["error"]["code"] == (
            "COMMAND_NOT_FOUND"
        )
