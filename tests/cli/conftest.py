# topmark:header:start
#
#   project      : auto-header
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""CLI test helpers for running auto-header in a controlled working directory.

`run_cli_in()` changes the working directory to the given project before
invoking the Click group, since ``run`` and ``install`` operate on the
current directory.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from autoheader.cli.exit_codes import ExitCode
from autoheader.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def run_cli_in(root: Path, argv: Sequence[str]) -> Result:
    """Invoke the CLI with ``root`` as the working directory.

    Args:
        root (Path): Directory to run in (usually a `project` fixture).
        argv (Sequence[str]): CLI arguments, e.g. ``["run", "a.js"]``.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(root)
        return runner.invoke(cli, list(argv))
    finally:
        os.chdir(cwd)


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the CLI exited with ``code`` (showing the output otherwise)."""
    assert result.exit_code == code, f"exit={result.exit_code}\n{result.output}"
