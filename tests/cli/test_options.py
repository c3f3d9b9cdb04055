# topmark:header:start
#
#   project      : auto-header
#   file         : test_options.py
#   file_relpath : tests/cli/test_options.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""Verbosity and color resolution of the command group."""

from __future__ import annotations

import logging

import pytest

from autoheader.cli.errors import AutoHeaderUsageError
from autoheader.cli.options import ColorMode, resolve_color_mode, resolve_verbosity
from autoheader.config.logging import TRACE_LEVEL


@pytest.mark.parametrize(
    ("verbose", "quiet", "expected"),
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (3, 0, TRACE_LEVEL),
        (0, 1, logging.ERROR),
    ],
)
def test_resolve_verbosity(verbose: int, quiet: int, expected: int) -> None:
    """-v and -q counts map onto logging levels."""
    assert resolve_verbosity(verbose, quiet) == expected


def test_resolve_verbosity_conflict() -> None:
    """-v and -q are mutually exclusive."""
    with pytest.raises(AutoHeaderUsageError):
        resolve_verbosity(1, 1)


def test_color_mode_explicit() -> None:
    """Explicit modes win over everything else."""
    assert resolve_color_mode(cli_mode=ColorMode.ALWAYS, stdout_isatty=False) is True
    assert resolve_color_mode(cli_mode=ColorMode.NEVER, stdout_isatty=True) is False


def test_color_mode_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """FORCE_COLOR and NO_COLOR apply in auto mode."""
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=False) is True
    monkeypatch.delenv("FORCE_COLOR")
    monkeypatch.setenv("NO_COLOR", "")
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=True) is False


def test_color_mode_follows_tty() -> None:
    """In auto mode without environment hints, a TTY enables color."""
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=True) is True
    assert resolve_color_mode(cli_mode=None, stdout_isatty=False) is False
