# topmark:header:start
#
#   project      : auto-header
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""Pytest configuration for the auto-header test suite.

Sets up logging for test runs and provides fixtures for a throwaway project
(configuration documents in ``tmp_path``) and for loaded settings.

Notes:
    Tests that exercise the updater inject a fixed ``now`` and a creation-date
    lookup so that they do not depend on the clock or on git.
"""

from __future__ import annotations

import json
import shutil
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

import pytest

from autoheader.config import GlobalConfig, HeaderConfig, Settings, logging
from autoheader.constants import GLOBAL_CONFIG_NAME, LOCAL_CONFIG_NAME

if TYPE_CHECKING:
    from pathlib import Path

#: Fixed processing time used across tests.
NOW: datetime = datetime(2025, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)
NOW_ISO: str = "2025-01-02T03:04:05.678Z"

AUTHOR: str = "Jane Doe"
EMAIL: str = "jane@example.com"

GLOBAL_CONFIG: dict[str, Any] = {
    "extensions": [".js", ".css", ".py"],
    "commentStyle": {
        ".js": {"type": "line", "start": "//"},
        ".css": {"type": "block", "start": "/*", "end": " */", "line": " *"},
        ".py": {"type": "line", "start": "#"},
    },
}

LOCAL_CONFIG: dict[str, Any] = {"author": AUTHOR, "email": EMAIL}

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment settings from leaking into tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove environment variables.
    """
    monkeypatch.delenv("AUTOHEADER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Enable TRACE logging so failing tests show the full diagnostics."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def write_configs(
    root: Path,
    *,
    global_config: dict[str, Any] | None = None,
    local_config: dict[str, Any] | None = None,
) -> None:
    """Write both configuration documents into ``root``."""
    (root / GLOBAL_CONFIG_NAME).write_text(
        json.dumps(GLOBAL_CONFIG if global_config is None else global_config), encoding="utf-8"
    )
    (root / LOCAL_CONFIG_NAME).write_text(
        json.dumps(LOCAL_CONFIG if local_config is None else local_config), encoding="utf-8"
    )


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Return a temporary project root holding valid configuration documents."""
    write_configs(tmp_path)
    return tmp_path


@pytest.fixture
def settings() -> Settings:
    """Return settings equivalent to the `project` fixture's documents."""
    return Settings(
        config=GlobalConfig.from_dict(GLOBAL_CONFIG),
        header=HeaderConfig.from_dict(LOCAL_CONFIG),
    )


def no_history(_path: Path) -> str | None:
    """Creation-date lookup for files without any version-control history."""
    return None
