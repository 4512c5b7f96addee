"""End-to-end runs of ``python -m cargocmd`` against a real shell."""

from __future__ import annotations

import os
import signal
import subprocess
import sys
import time
from pathlib import Path

import pytest

from tests.conftest import write_manifest

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="uses POSIX shell syntax")


def run_cli(cwd: Path, *args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", "cargocmd", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=False,
    )


class TestEndToEnd:
    def test_echo(self, tmp_path: Path) -> None:
        write_manifest(tmp_path, {"test": "echo hello"})
        proc = run_cli(tmp_path, "cmd", "test")
        assert proc.returncode == 0
        assert proc.stdout == "> echo hello\nhello\n"

    def test_exit_code(self, tmp_path: Path) -> None:
        write_manifest(tmp_path, {"test": "exit 3", "posttest": "echo post"})
        proc = run_cli(tmp_path, "cmd", "test")
        assert proc.returncode == 3
        assert "[posttest]" not in proc.stdout
        assert "post\n" not in proc.stdout

    def test_labelled_phases(self, tmp_path: Path) -> None:
        write_manifest(tmp_path, {"pretest": "echo pre", "test": "echo main"})
        proc = run_cli(tmp_path, "cmd", "test")
        assert proc.returncode == 0
        lines = [line for line in proc.stdout.splitlines() if line]
        assert lines == ["[pretest]", "> echo pre", "pre", "[test]", "> echo main", "main"]

    def test_workspace_and_rest(self, tmp_path: Path) -> None:
        write_manifest(tmp_path, {"greet": "echo hi"}, scope="workspace")
        proc = run_cli(tmp_path, "cmd", "greet", "--loud", "there")
        assert proc.returncode == 0
        assert proc.stdout == "> echo hi --loud there\nhi --loud there\n"

    def test_signal_becomes_generic_failure(self, tmp_path: Path) -> None:
        write_manifest(tmp_path, {"test": "kill -KILL $$"})
        assert run_cli(tmp_path, "cmd", "test").returncode == 1

    def test_missing_command_runs_nothing(self, tmp_path: Path) -> None:
        write_manifest(tmp_path, {"pretest": "echo pre"})
        proc = run_cli(tmp_path, "cmd", "test")
        assert proc.returncode == 1
        assert proc.stdout == ""
        assert 'Command "test" not found in Cargo.toml' in proc.stderr

    def test_missing_manifest(self, tmp_path: Path) -> None:
        proc = run_cli(tmp_path, "cmd", "test")
        assert proc.returncode == 1
        assert "Could not find or open Cargo.toml" in proc.stderr


def _wait_for(path: Path, timeout: float = 15.0) -> None:
    deadline = time.monotonic() + timeout
    while not path.exists():
        if time.monotonic() > deadline:
            raise AssertionError(f"{path} never appeared")
        time.sleep(0.05)


def interrupt_cli(cwd: Path, ready: Path, *args: str) -> subprocess.CompletedProcess[str]:
    """Start the CLI in its own process group, then Ctrl-C the group once *ready* exists."""
    proc = subprocess.Popen(
        [sys.executable, "-m", "cargocmd", *args],
        cwd=cwd,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        start_new_session=True,
    )
    try:
        _wait_for(ready)
        os.killpg(proc.pid, signal.SIGINT)
        stdout, stderr = proc.communicate(timeout=15)
    finally:
        if proc.poll() is None:
            proc.kill()
            proc.wait()
    return subprocess.CompletedProcess(proc.args, proc.returncode, stdout, stderr)


class TestInterrupt:
    def test_child_finishes_its_own_cleanup(self, tmp_path: Path) -> None:
        ready, cleaned = tmp_path / "ready", tmp_path / "cleaned"
        serve = (
            f"trap 'sleep 1; touch {cleaned}; exit 0' INT; "
            f"touch {ready}; sleep 5 >/dev/null 2>&1 & wait"
        )
        write_manifest(tmp_path, {"serve": serve})
        proc = interrupt_cli(tmp_path, ready, "cmd", "serve")
        assert cleaned.exists()
        assert proc.returncode == 0
        assert "Aborted" not in proc.stderr

    def test_child_exit_code_after_interrupt(self, tmp_path: Path) -> None:
        ready = tmp_path / "ready"
        serve = f"trap 'exit 42' INT; touch {ready}; sleep 5 >/dev/null 2>&1 & wait"
        write_manifest(tmp_path, {"serve": serve, "postserve": "echo post"})
        proc = interrupt_cli(tmp_path, ready, "cmd", "serve")
        assert proc.returncode == 42
        assert "post\n" not in proc.stdout
        assert "Aborted" not in proc.stderr
