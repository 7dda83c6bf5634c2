# topmark:header:start
#
#   project      : tfremover
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""CLI test helpers for running tfremover in a controlled working directory.

`run_cli_in()` changes the process working directory to the given directory
before invoking the Click CLI, so that relative paths resolve against the
temporary test project.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Sequence

import pytest
from click.testing import CliRunner, Result

from tfremover.cli.main import cli
from tfremover.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Return an empty project directory that stops config discovery."""
    root: Path = tmp_path / "proj"
    root.mkdir()
    (root / "tfremover.toml").write_text("root = true\n", encoding="utf-8")
    return root


def run_cli_in(directory: Path, argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI with ``directory`` as the working directory.

    Args:
        directory (Path): Working directory for the invocation.
        argv (str | Sequence[str] | None): CLI argument vector.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(directory)
        return runner.invoke(cli, argv)
    finally:
        os.chdir(cwd)


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI without changing the working directory."""
    return CliRunner().invoke(cli, argv)


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that ``result`` exited with ``code``, showing the output otherwise."""
    assert result.exit_code == code, (
        f"expected exit {int(code)}, got {result.exit_code}\n{result.output}"
    )


def assert_SUCCESS(result: Result) -> None:
    assert_exit(result, ExitCode.SUCCESS)
