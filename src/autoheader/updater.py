# topmark:header:start
#
#   project      : auto-header
#   file         : updater.py
#   file_relpath : src/autoheader/updater.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""Update auto-header blocks in files.

[`process_files`][autoheader.updater.process_files] is the entry point used
by the ``run`` command (and the pre-commit hook). It loads both
configuration documents once, then processes every path independently and
in order:

1. skip files that do not exist, whose extension is not enabled, that match
   an ``exclude`` pattern, or that have no comment style;
2. read the file and locate an existing header;
3. resolve the creation date: the existing ``Created`` value, else the
   oldest git commit of the file, else *now*;
4. render a fresh header (``Last Modified`` is always *now*), splice out the
   old one and put the new one on top (below a shebang line, if any);
5. write the file back only if its content changed.

Per-file read or write failures are reported in the results and do not stop
the batch. Configuration problems raise before any file is touched.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Final

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from autoheader.config.io import load_settings
from autoheader.config.logging import get_logger
from autoheader.header.composer import build_header, extract_created_date
from autoheader.header.dates import to_iso, utc_now
from autoheader.header.scanner import find_header
from autoheader.status import UpdateStatus
from autoheader.vcs import git_creation_date

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from datetime import datetime

    from autoheader.config.io import Settings
    from autoheader.config.logging import AutoHeaderLogger
    from autoheader.header.scanner import HeaderSpan

logger: AutoHeaderLogger = get_logger(__name__)

#: Looks up the creation date of a file; returns None when unknown.
CreationLookup = Callable[[Path], "str | None"]

_RE_LEADING_BLANK_LINES: Final[re.Pattern[str]] = re.compile(r"\A(?:[ \t]*\r?\n)+")


@dataclass(frozen=True, slots=True)
class FileResult:
    """Outcome of processing one file.

    Attributes:
        path (Path): The file, as given (resolved against the project root).
        status (UpdateStatus): What happened to the file.
        created (str | None): Creation date written to the header, if one was rendered.
        error (str | None): Error message for ``READ_ERROR`` / ``WRITE_ERROR``.
    """

    path: Path
    status: UpdateStatus
    created: str | None = None
    error: str | None = None


def detect_newline(content: str) -> str:
    """Return ``"\\r\\n"`` if the first line ends with CRLF, else ``"\\n"``."""
    idx: int = content.find("\n")
    if idx > 0 and content[idx - 1] == "\r":
        return "\r\n"
    return "\n"


def strip_leading_blank_lines(text: str) -> str:
    """Drop blank lines at the start of ``text``; whitespace-only text becomes empty."""
    text = _RE_LEADING_BLANK_LINES.sub("", text)
    return text if text.strip() else ""


def split_shebang(text: str, newline: str) -> tuple[str, str]:
    """Split a leading ``#!`` line (with its line ending) from the rest of ``text``."""
    if not text.startswith("#!"):
        return "", text
    idx: int = text.find("\n")
    if idx == -1:
        return f"{text}{newline}", ""
    return text[: idx + 1], text[idx + 1 :]


def splice_header(content: str, span: HeaderSpan | None, header: str, newline: str) -> str:
    """Return ``content`` with ``span`` removed and ``header`` placed on top.

    The header is followed by one blank line. Leading blank lines of the
    remaining content are dropped, and a shebang line stays first.
    """
    remainder: str = content if span is None else content[: span.start] + content[span.end :]
    shebang, body = split_shebang(strip_leading_blank_lines(remainder), newline)
    body = strip_leading_blank_lines(body)
    return f"{shebang}{header}{newline}{newline}{body}"


def resolve_creation_date(
    path: Path,
    span: HeaderSpan | None,
    *,
    lookup: CreationLookup,
    now: datetime,
) -> str:
    """Return the creation date for ``path``.

    Priority: the ``Created`` field of the existing header, then ``lookup``
    (git history), then ``now``.
    """
    if span is not None:
        created: str | None = extract_created_date(span.text)
        if created is not None:
            return created
        logger.debug("%s: header has no usable Created field", path)
    created = lookup(path)
    if created is not None:
        return created
    logger.debug("%s: no creation date in history, using current time", path)
    return to_iso(now)


def _relpath_for_match(path: Path, root: Path) -> str:
    try:
        return path.resolve().relative_to(root.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def build_exclude_spec(patterns: Iterable[str]) -> PathSpec | None:
    """Compile gitignore-style exclude patterns, or return None when there are none."""
    lines: list[str] = [p for p in patterns if p.strip()]
    if not lines:
        return None
    return PathSpec.from_lines(GitWildMatchPattern, lines)


def update_file(
    path: Path,
    *,
    settings: Settings,
    root: Path,
    now: datetime | None = None,
    dry_run: bool = False,
    lookup: CreationLookup = git_creation_date,
    exclude_spec: PathSpec | None = None,
) -> FileResult:
    """Insert or refresh the header of a single file.

    Args:
        path (Path): File to process; relative paths are resolved against ``root``.
        settings (Settings): Loaded configuration documents.
        root (Path): Project root (base of relative paths and exclude patterns).
        now (datetime | None): Processing time; defaults to the current UTC time.
        dry_run (bool): If True, never write; report ``WOULD_UPDATE`` instead.
        lookup (CreationLookup): Creation-date lookup used when no header provides one.
        exclude_spec (PathSpec | None): Compiled exclude patterns.

    Returns:
        FileResult: The outcome for this file.
    """
    target: Path = path if path.is_absolute() else root / path
    config = settings.config

    try:
        is_file: bool = target.is_file()
    except OSError as exc:
        logger.error("Cannot access %s: %s", target, exc)
        return FileResult(path=target, status=UpdateStatus.READ_ERROR, error=str(exc))
    if not is_file:
        logger.debug("Skipping %s: not found", target)
        return FileResult(path=target, status=UpdateStatus.SKIPPED_NOT_FOUND)
    if target.suffix not in config.extensions:
        logger.debug("Skipping %s: extension %r not enabled", target, target.suffix)
        return FileResult(path=target, status=UpdateStatus.SKIPPED_EXTENSION)
    if exclude_spec is not None and exclude_spec.match_file(_relpath_for_match(target, root)):
        logger.debug("Skipping %s: matches an exclude pattern", target)
        return FileResult(path=target, status=UpdateStatus.SKIPPED_EXCLUDED)
    style = config.comment_styles.get(target.suffix)
    if style is None:
        logger.debug("Skipping %s: no comment style for %r", target, target.suffix)
        return FileResult(path=target, status=UpdateStatus.SKIPPED_NO_STYLE)

    try:
        with open(target, encoding="utf-8", newline="") as fh:
            original: str = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Cannot read %s: %s", target, exc)
        return FileResult(path=target, status=UpdateStatus.READ_ERROR, error=str(exc))

    stamp: datetime = now or utc_now()
    span = find_header(original, style)
    created: str = resolve_creation_date(target, span, lookup=lookup, now=stamp)
    newline: str = detect_newline(original)
    header: str = build_header(
        style,
        settings.header.author,
        settings.header.email,
        created,
        stamp,
        newline=newline,
    )
    updated: str = splice_header(original, span, header, newline)
    logger.trace("%s: header %s, created %s", target, "replaced" if span else "inserted", created)

    if updated == original:
        return FileResult(path=target, status=UpdateStatus.UNCHANGED, created=created)
    if dry_run:
        return FileResult(path=target, status=UpdateStatus.WOULD_UPDATE, created=created)

    try:
        with open(target, "w", encoding="utf-8", newline="") as fh:
            fh.write(updated)
    except OSError as exc:
        logger.error("Cannot write %s: %s", target, exc)
        return FileResult(
            path=target, status=UpdateStatus.WRITE_ERROR, created=created, error=str(exc)
        )
    logger.info("Updated header in %s", target)
    return FileResult(path=target, status=UpdateStatus.UPDATED, created=created)


def update_files(
    paths: Iterable[Path | str],
    *,
    settings: Settings,
    root: Path,
    now: datetime | None = None,
    dry_run: bool = False,
    lookup: CreationLookup | None = None,
) -> list[FileResult]:
    """Process ``paths`` in order with already loaded ``settings``.

    Returns:
        list[FileResult]: One result per input path, in input order.
    """
    if lookup is None:
        lookup = partial(git_creation_date, timeout=settings.config.vcs_timeout)
    exclude_spec = build_exclude_spec(settings.config.exclude)
    return [
        update_file(
            Path(p),
            settings=settings,
            root=root,
            now=now,
            dry_run=dry_run,
            lookup=lookup,
            exclude_spec=exclude_spec,
        )
        for p in paths
    ]


def process_files(
    paths: Sequence[Path | str],
    *,
    root: Path | None = None,
    now: datetime | None = None,
    dry_run: bool = False,
) -> list[FileResult]:
    """Load the configuration of the project at ``root`` and update ``paths``.

    Args:
        paths (Sequence[Path | str]): Files to process (relative to ``root``).
        root (Path | None): Project root holding the configuration documents;
            defaults to the current working directory.
        now (datetime | None): Processing time; defaults to the current time per file.
        dry_run (bool): If True, report what would change without writing.

    Returns:
        list[FileResult]: One result per path.

    Raises:
        ConfigError: If a configuration document is missing or invalid. No file
            is touched in that case.
    """
    project_root: Path = root or Path.cwd()
    settings: Settings = load_settings(project_root)
    logger.debug("Processing %d file(s) in %s", len(paths), project_root)
    return update_files(paths, settings=settings, root=project_root, now=now, dry_run=dry_run)
