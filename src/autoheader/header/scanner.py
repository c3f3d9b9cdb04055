# topmark:header:start
#
#   project      : auto-header
#   file         : scanner.py
#   file_relpath : src/autoheader/header/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""Locate an existing auto-header block with a line scanner.

The scanner walks the file line by line: it looks for the start marker
line (preceded by the opening fence for block styles), then for the first
end marker line after it (followed by the closing fence for block styles).
It recognizes the same blocks as
[`build_header_regex`][autoheader.header.composer.build_header_regex] but
does not depend on a single pattern spanning nested comment delimiters.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Final

from autoheader.config.logging import get_logger
from autoheader.config.model import BlockCommentStyle
from autoheader.constants import HEADER_END_MARKER, HEADER_START_MARKER

if TYPE_CHECKING:
    from autoheader.config.logging import AutoHeaderLogger
    from autoheader.config.model import CommentStyle

logger: AutoHeaderLogger = get_logger(__name__)

# Split after each LF, keeping line endings (CRLF stays attached to its line)
_RE_LINE_SPLIT: Final[re.Pattern[str]] = re.compile(r"(?<=\n)")


@dataclass(frozen=True, slots=True)
class HeaderSpan:
    """Location of a header block inside a text.

    Attributes:
        start (int): Offset of the first character of the block.
        end (int): Offset just past the block, including one trailing newline if present.
        text (str): The block text (``content[start:end]``).
    """

    start: int
    end: int
    text: str


class _State(Enum):
    SEEK_START = auto()
    SEEK_END = auto()


def _is_directive(line: str, prefix: str, directive: str) -> bool:
    """Return True if ``line`` is ``<prefix> <directive>`` (surrounding whitespace ignored)."""
    s: str = line.strip()
    if not s.startswith(prefix):
        return False
    return s[len(prefix) :].strip() == directive


def _is_fence(line: str, fence: str) -> bool:
    return line.strip() == fence


def find_header(content: str, style: CommentStyle) -> HeaderSpan | None:
    """Return the span of the first header block in ``content``, or None.

    Args:
        content (str): File content.
        style (CommentStyle): Comment style of the file.

    Returns:
        HeaderSpan | None: The first complete header, or None when there is no
        start marker, or no matching end marker after it.
    """
    lines: list[str] = [ln for ln in _RE_LINE_SPLIT.split(content) if ln]
    offsets: list[int] = []
    pos = 0
    for line in lines:
        offsets.append(pos)
        pos += len(line)
    offsets.append(pos)

    prefix: str = (style.line if isinstance(style, BlockCommentStyle) else style.start).strip()

    state = _State.SEEK_START
    first: int = -1
    for i, line in enumerate(lines):
        if state is _State.SEEK_START:
            if not _is_directive(line, prefix, HEADER_START_MARKER):
                continue
            if isinstance(style, BlockCommentStyle):
                if i == 0 or not _is_fence(lines[i - 1], style.start.strip()):
                    continue
                first = i - 1
            else:
                first = i
            state = _State.SEEK_END
            logger.trace("Header start marker at line %d", i + 1)
        elif _is_directive(line, prefix, HEADER_END_MARKER):
            last: int = i
            if isinstance(style, BlockCommentStyle):
                if i + 1 >= len(lines) or not _is_fence(lines[i + 1], style.end.strip()):
                    logger.debug("Header end marker at line %d lacks closing fence", i + 1)
                    continue
                last = i + 1
            logger.trace("Header end marker at line %d", i + 1)
            start, end = offsets[first], offsets[last + 1]
            return HeaderSpan(start=start, end=end, text=content[start:end])

    if state is _State.SEEK_END:
        logger.debug("Header start marker without end marker")
    return None
