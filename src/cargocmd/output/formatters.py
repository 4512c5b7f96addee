"""Human/JSON rendering of ServiceResult.

Only failures and ``list`` output go through here; the progress lines of a
run are printed by the executor.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from cargocmd.services.result import ServiceResult


_BARE_KEY = re.compile(r"[A-Za-z0-9_-]+")
_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t", "\r": "\\r"}


def toml_string(value: str) -> str:
    """Quote *value* as a TOML basic string."""
    out = []
    for char in value:
        if char in _ESCAPES:
            out.append(_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            out.append(f"\\u{ord(char):04X}")
        else:
            out.append(char)
    return '"' + "".join(out) + '"'


def toml_key(name: str) -> str:
    """Bare key when TOML allows it, quoted otherwise."""
    return name if _BARE_KEY.fullmatch(name) else toml_string(name)


def _format_commands_human(data: dict[str, Any]) -> str:
    """Render ``list_commands`` data as a valid TOML table."""
    lines = [f"[{data['scope']}.metadata.commands]"]
    for name, command in data["commands"].items():
        lines.append(f"{toml_key(name)} = {toml_string(command)}")
    return "\n".join(lines)


def format_result(result: ServiceResult, *, json_output: bool = False) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    if not result.ok:
        error_msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {error_msg}"
    if result.op == "list_commands":
        return _format_commands_human(result.data)
    return f"OK: {result.op}"
