# topmark:header:start
#
#   project      : auto-header
#   file         : run.py
#   file_relpath : src/autoheader/cli/commands/run.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""auto-header ``run`` command.

Inserts or refreshes the header of each given file. This is the command the
pre-commit hook calls with the staged file names.

Examples:
  Update two files:

    $ auto-header run src/app.js src/util.js

  Report which files would change, without writing:

    $ auto-header run --dry-run src/app.js
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from autoheader.cli.cmd_common import get_console, is_quiet, is_verbose
from autoheader.cli.errors import AutoHeaderConfigError, AutoHeaderIOError, AutoHeaderUsageError
from autoheader.cli.exit_codes import ExitCode
from autoheader.cli.options import CONTEXT_SETTINGS
from autoheader.config.logging import get_logger
from autoheader.errors import ConfigError
from autoheader.status import UpdateStatus
from autoheader.updater import process_files

if TYPE_CHECKING:
    from autoheader.cli.console import ClickConsole
    from autoheader.updater import FileResult

logger = get_logger(__name__)


def _status_label(console: ClickConsole, status: UpdateStatus) -> str:
    return status.color(status.value) if console.enable_color else status.value


def render_result(console: ClickConsole, shown: str, result: FileResult, *, verbose: bool) -> None:
    """Print the progress line for one file."""
    if result.status is UpdateStatus.UPDATED:
        console.print(console.styled(f"  ✓ Updated: {shown}", fg="green"))
    elif result.status is UpdateStatus.WOULD_UPDATE:
        console.print(console.styled(f"  • Would update: {shown}", fg="yellow"))
    elif result.status.is_error:
        console.error(f"  ✗ {result.status.value}: {shown}: {result.error}")
    elif verbose:
        console.print(f"  - {shown}: {_status_label(console, result.status)}")


@click.command(
    name="run",
    help="Insert or refresh auto-header blocks in FILES.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Files that do not exist, whose extension is not enabled in
auto-header.config.json, or that match an exclude pattern are skipped.

Examples:

  # Used by the pre-commit hook
  auto-header run src/app.js src/util.js

  # Preview only
  auto-header run --dry-run src/app.js
""",
)
@click.argument("files", nargs=-1, type=click.Path(path_type=Path))
@click.option(
    "--dry-run",
    "dry_run",
    is_flag=True,
    help="Report files that would be updated without writing them.",
)
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project root holding the configuration files (default: current directory).",
)
def run_command(
    *,
    files: tuple[Path, ...],
    dry_run: bool,
    root: Path | None,
) -> None:
    """Update headers of the given files.

    Args:
        files (tuple[Path, ...]): Files to process, relative to the project root.
        dry_run (bool): Report instead of writing.
        root (Path | None): Project root; defaults to the current directory.

    Raises:
        AutoHeaderUsageError: If no file is given.
        AutoHeaderConfigError: If a configuration document is missing or invalid.
        AutoHeaderIOError: If one or more files could not be read or written.

    Exit Status:
      SUCCESS (0): All files processed.
      WOULD_CHANGE (2): ``--dry-run`` found files that would be updated.
      USAGE_ERROR (64): No files given.
      IO_ERROR (74): Some files could not be read or written.
      CONFIG_ERROR (78): Missing or invalid configuration.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    quiet: bool = is_quiet(ctx)
    verbose: bool = is_verbose(ctx)

    if not files:
        raise AutoHeaderUsageError("The 'run' command requires file paths to be specified.")

    if not quiet:
        console.print(
            console.styled(f"Auto Header: Processing {len(files)} file(s)...", fg="blue")
        )

    try:
        results: list[FileResult] = process_files(list(files), root=root, dry_run=dry_run)
    except ConfigError as exc:
        raise AutoHeaderConfigError(str(exc)) from exc

    for shown, result in zip(files, results):
        if quiet and not result.status.is_error:
            continue
        render_result(console, str(shown), result, verbose=verbose)

    failed: int = sum(1 for r in results if r.status.is_error)
    skipped: int = sum(1 for r in results if r.status.is_skipped)
    logger.debug(
        "run: %d result(s), %d skipped, %d failed", len(results), skipped, failed
    )
    if failed:
        raise AutoHeaderIOError(f"Failed to process {failed} file(s). See messages above.")

    if not quiet:
        console.print(console.styled("✓ Auto-header finished.", fg="green"))

    if dry_run and any(r.status.changes_file for r in results):
        ctx.exit(ExitCode.WOULD_CHANGE)
