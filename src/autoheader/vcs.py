# topmark:header:start
#
#   project      : auto-header
#   file         : vcs.py
#   file_relpath : src/autoheader/vcs.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""Query git for the creation date of a file.

The creation date of a file is the author date of its oldest commit,
following renames (``git log --follow``). Any failure (git missing, not a
repository, untracked file, timeout) yields None so that the caller can fall
back to the current time.
"""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING

from autoheader.config.logging import get_logger
from autoheader.errors import InvalidDateError
from autoheader.header.dates import to_iso

if TYPE_CHECKING:
    from pathlib import Path

    from autoheader.config.logging import AutoHeaderLogger

logger: AutoHeaderLogger = get_logger(__name__)

GIT_EXECUTABLE: str = "git"


def git_creation_date(path: Path, *, timeout: float | None = None) -> str | None:
    """Return the ISO-8601 date of the first commit that added ``path``.

    Args:
        path (Path): File to look up. git runs in the file's directory.
        timeout (float | None): Seconds to wait for git; None waits indefinitely.

    Returns:
        str | None: The normalized creation date, or None when git cannot tell.
    """
    cmd: list[str] = [GIT_EXECUTABLE, "log", "--follow", "--format=%aI", "--", path.name]
    try:
        proc: subprocess.CompletedProcess[str] = subprocess.run(  # noqa: S603
            cmd,
            cwd=path.parent,
            capture_output=True,
            text=True,
            check=False,
            timeout=timeout,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("git query failed for %s: %s", path, exc)
        return None

    if proc.returncode != 0:
        logger.debug(
            "git exited with %d for %s: %s", proc.returncode, path, proc.stderr.strip()
        )
        return None

    # Newest first: the last line is the commit that introduced the file.
    dates: list[str] = [ln for ln in proc.stdout.splitlines() if ln.strip()]
    if not dates:
        logger.debug("No git history for %s", path)
        return None
    try:
        return to_iso(dates[-1])
    except InvalidDateError:
        logger.debug("Unparsable git date %r for %s", dates[-1], path)
        return None
