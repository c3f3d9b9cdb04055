# topmark:header:start
#
#   project      : auto-header
#   file         : composer.py
#   file_relpath : src/autoheader/header/composer.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""Render auto-header blocks and the patterns that detect them.

A header carries five payload lines between its markers:

    @auto-header-start
    Author:         Jane Doe <jane@example.com>
    Created:        2024-05-01T08:30:00.000Z
    Last Modified:  2025-01-12T17:04:51.123Z
    @auto-header-end

With a line comment style every payload line gets the style's ``start``
prefix (``// @auto-header-start``). With a block comment style the payload
lines get the ``line`` prefix and are wrapped in the ``start``/``end``
fences:

    /*
     * @auto-header-start
     * ...
     * @auto-header-end
     */
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from autoheader.config.model import BlockCommentStyle
from autoheader.constants import HEADER_END_MARKER, HEADER_START_MARKER
from autoheader.errors import InvalidDateError
from autoheader.header.dates import to_iso

if TYPE_CHECKING:
    from datetime import datetime

    from autoheader.config.model import CommentStyle

#: Width of the field labels, so that values line up.
LABEL_WIDTH: Final[int] = 16

LABEL_AUTHOR: Final[str] = "Author:"
LABEL_CREATED: Final[str] = "Created:"
LABEL_MODIFIED: Final[str] = "Last Modified:"

_RE_CREATED: Final[re.Pattern[str]] = re.compile(rf"{re.escape(LABEL_CREATED)}[ \t]*(.+)")


def header_payload(
    author: str,
    email: str,
    created: datetime | str,
    modified: datetime | str,
) -> list[str]:
    """Return the header lines without comment syntax.

    Raises:
        InvalidDateError: If ``created`` or ``modified`` is not a valid date.
    """
    return [
        HEADER_START_MARKER,
        f"{LABEL_AUTHOR:<{LABEL_WIDTH}}{author} <{email}>",
        f"{LABEL_CREATED:<{LABEL_WIDTH}}{to_iso(created)}",
        f"{LABEL_MODIFIED:<{LABEL_WIDTH}}{to_iso(modified)}",
        HEADER_END_MARKER,
    ]


def build_header(
    style: CommentStyle,
    author: str,
    email: str,
    created: datetime | str,
    modified: datetime | str,
    *,
    newline: str = "\n",
) -> str:
    """Render a complete header block for ``style``.

    Args:
        style (CommentStyle): Comment syntax to render with.
        author (str): Author name.
        email (str): Author email.
        created (datetime | str): Creation timestamp.
        modified (datetime | str): Last modification timestamp.
        newline (str): Line separator (``"\\n"`` or ``"\\r\\n"``).

    Returns:
        str: The header text, without a trailing newline.

    Raises:
        InvalidDateError: If either timestamp cannot be parsed.
    """
    payload: list[str] = header_payload(author, email, created, modified)
    if isinstance(style, BlockCommentStyle):
        lines = [style.start, *(f"{style.line} {p}" for p in payload), style.end]
    else:
        lines = [f"{style.start} {p}" for p in payload]
    return newline.join(lines)


def build_header_regex(style: CommentStyle) -> re.Pattern[str]:
    """Return a pattern matching the first header rendered with ``style``.

    The match runs from the opening fence (block style) or the start marker
    line (line style) through the closing fence or end marker line, plus at
    most one trailing newline. Use ``pattern.search(content)``.
    """
    start_marker: str = re.escape(HEADER_START_MARKER)
    end_marker: str = re.escape(HEADER_END_MARKER)
    eol: str = r"[ \t]*\r?\n"
    last_eol: str = r"[ \t]*(?:\r?\n|\Z)"

    if isinstance(style, BlockCommentStyle):
        fence_open: str = re.escape(style.start.strip())
        fence_close: str = re.escape(style.end.strip())
        prefix: str = re.escape(style.line.strip())
        pattern = (
            rf"^[ \t]*{fence_open}{eol}"
            rf"[ \t]*{prefix}[ \t]*{start_marker}{eol}"
            rf".*?"
            rf"^[ \t]*{prefix}[ \t]*{end_marker}{eol}"
            rf"[ \t]*{fence_close}{last_eol}"
        )
    else:
        prefix = re.escape(style.start.strip())
        pattern = (
            rf"^[ \t]*{prefix}[ \t]*{start_marker}{eol}"
            rf".*?"
            rf"^[ \t]*{prefix}[ \t]*{end_marker}{last_eol}"
        )
    return re.compile(pattern, re.MULTILINE | re.DOTALL)


def extract_created_date(header_text: str) -> str | None:
    """Return the normalized ``Created`` value of a header, or None.

    Absence and unparsable values both yield None; this never raises.
    """
    match = _RE_CREATED.search(header_text)
    if match is None:
        return None
    try:
        return to_iso(match.group(1))
    except InvalidDateError:
        return None
