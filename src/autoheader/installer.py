# topmark:header:start
#
#   project      : auto-header
#   file         : installer.py
#   file_relpath : src/autoheader/installer.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""Scaffold auto-header into a host project.

Each function performs one installation step; the ``install`` command calls
them in order and reports progress:

1. copy the configuration templates into the project root;
2. make git ignore the local (per-developer) configuration;
3. install the `pre-commit` hook manager with pip;
4. register the ``auto-header`` hook in ``.pre-commit-config.yaml``;
5. activate the git hook with ``pre-commit install``.

Steps 3 and 5 shell out and raise
[`InstallError`][autoheader.errors.InstallError] on failure.
"""

from __future__ import annotations

import re
import subprocess
import sys
from enum import Enum
from typing import TYPE_CHECKING, Final

from autoheader.config.io import load_template_text
from autoheader.config.logging import get_logger
from autoheader.constants import (
    GLOBAL_CONFIG_NAME,
    GLOBAL_CONFIG_TEMPLATE,
    LOCAL_CONFIG_NAME,
    LOCAL_CONFIG_TEMPLATE,
    PRECOMMIT_CONFIG_NAME,
    PRECOMMIT_CONFIG_TEMPLATE,
    PRECOMMIT_HOOK_ID,
)
from autoheader.errors import InstallError

if TYPE_CHECKING:
    from pathlib import Path

    from autoheader.config.logging import AutoHeaderLogger

logger: AutoHeaderLogger = get_logger(__name__)

HOOK_MANAGER_PACKAGE: Final[str] = "pre-commit"
GITIGNORE_NAME: Final[str] = ".gitignore"
GITIGNORE_COMMENT: Final[str] = "# auto-header local config"

_RE_HOOK_ID: Final[re.Pattern[str]] = re.compile(
    rf"^\s*(?:-\s*)?id:\s*['\"]?{re.escape(PRECOMMIT_HOOK_ID)}['\"]?\s*$", re.MULTILINE
)

#: (template name, destination name) pairs copied by `copy_config_templates`.
CONFIG_TEMPLATES: Final[tuple[tuple[str, str], ...]] = (
    (GLOBAL_CONFIG_TEMPLATE, GLOBAL_CONFIG_NAME),
    (LOCAL_CONFIG_TEMPLATE, LOCAL_CONFIG_NAME),
)


class HookConfigOutcome(str, Enum):
    """Result of registering the hook in ``.pre-commit-config.yaml``."""

    CREATED = "created"
    ALREADY_CONFIGURED = "already configured"
    MANUAL_EDIT_REQUIRED = "manual edit required"


def copy_config_templates(root: Path, *, force: bool = False) -> list[tuple[Path, bool]]:
    """Write the bundled configuration templates into ``root``.

    Args:
        root (Path): Project root.
        force (bool): Overwrite existing configuration files.

    Returns:
        list[tuple[Path, bool]]: Each destination with a flag telling whether it was written.
    """
    results: list[tuple[Path, bool]] = []
    for template, name in CONFIG_TEMPLATES:
        dest: Path = root / name
        if dest.exists() and not force:
            logger.info("Keeping existing %s", dest)
            results.append((dest, False))
            continue
        dest.write_text(load_template_text(template), encoding="utf-8")
        logger.info("Wrote %s", dest)
        results.append((dest, True))
    return results


def ensure_gitignore_entry(root: Path, entry: str = LOCAL_CONFIG_NAME) -> bool:
    """Append ``entry`` to the project's ``.gitignore`` unless already listed.

    Returns:
        bool: True if the file was modified (or created).
    """
    path: Path = root / GITIGNORE_NAME
    content: str = path.read_text(encoding="utf-8") if path.exists() else ""
    if any(line.strip() in (entry, f"/{entry}") for line in content.splitlines()):
        return False
    if not content:
        prefix: str = ""
    else:
        prefix = "\n" if content.endswith("\n") else "\n\n"
    with path.open("a", encoding="utf-8") as fh:
        fh.write(f"{prefix}{GITIGNORE_COMMENT}\n{entry}\n")
    return True


def _run(cmd: list[str], *, root: Path, what: str) -> None:
    logger.debug("Running %s in %s", cmd, root)
    try:
        proc: subprocess.CompletedProcess[str] = subprocess.run(  # noqa: S603
            cmd,
            cwd=root,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        raise InstallError(f"Failed to {what}: {exc}") from exc
    if proc.returncode != 0:
        details: str = (proc.stderr or proc.stdout).strip()
        raise InstallError(f"Failed to {what} (exit code {proc.returncode}): {details}")


def install_hook_manager(root: Path) -> None:
    """Install the pre-commit package into the running interpreter's environment.

    Raises:
        InstallError: If pip fails.
    """
    _run(
        [sys.executable, "-m", "pip", "install", HOOK_MANAGER_PACKAGE],
        root=root,
        what=f"install {HOOK_MANAGER_PACKAGE}",
    )


def hook_snippet() -> str:
    """Return the ``repos`` entry declaring the auto-header hook."""
    lines: list[str] = load_template_text(PRECOMMIT_CONFIG_TEMPLATE).splitlines(keepends=True)
    return "".join(line for line in lines if line.strip() != "repos:")


def configure_precommit(root: Path) -> HookConfigOutcome:
    """Register the auto-header hook in ``.pre-commit-config.yaml``.

    A missing file is created from the bundled template. An existing file
    that already declares the hook is left alone; otherwise the caller must
    ask the user to add [`hook_snippet`][autoheader.installer.hook_snippet].
    """
    path: Path = root / PRECOMMIT_CONFIG_NAME
    if not path.exists():
        path.write_text(load_template_text(PRECOMMIT_CONFIG_TEMPLATE), encoding="utf-8")
        return HookConfigOutcome.CREATED
    if _RE_HOOK_ID.search(path.read_text(encoding="utf-8")):
        return HookConfigOutcome.ALREADY_CONFIGURED
    return HookConfigOutcome.MANUAL_EDIT_REQUIRED


def activate_hooks(root: Path) -> None:
    """Install the git pre-commit hook via ``pre-commit install``.

    Raises:
        InstallError: If pre-commit is unavailable or fails (e.g. not a git repository).
    """
    _run(
        [sys.executable, "-m", "pre_commit", "install"],
        root=root,
        what="activate the pre-commit hook",
    )
