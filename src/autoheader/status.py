# topmark:header:start
#
#   project      : auto-header
#   file         : status.py
#   file_relpath : src/autoheader/status.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""Per-file outcome of an update run.

`UpdateStatus` is a string enum whose members also carry a yachalk colorizer
so that the CLI can render outcomes without a lookup table. The enum value
stays a plain string (hashing, equality and ``repr`` behave normally).
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from yachalk import chalk


class Colorizer(Protocol):
    """Callable that decorates a string for display (e.g. a yachalk ``ChalkBuilder``)."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and join ``args`` into a display string."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose value is a string and that carries an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a member storing ``text`` as value and ``color`` aside."""
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def color(self) -> Colorizer:
        """The colorizer associated with this member."""
        return self._color


class UpdateStatus(ColoredStrEnum):
    """Outcome of processing one file."""

    UPDATED = ("updated", chalk.green)
    WOULD_UPDATE = ("would update", chalk.yellow)
    UNCHANGED = ("unchanged", chalk.gray)
    SKIPPED_NOT_FOUND = ("not found", chalk.gray)
    SKIPPED_EXTENSION = ("extension not enabled", chalk.gray)
    SKIPPED_EXCLUDED = ("excluded by pattern", chalk.gray)
    SKIPPED_NO_STYLE = ("no comment style for extension", chalk.yellow)
    READ_ERROR = ("read error", chalk.red_bright)
    WRITE_ERROR = ("write error", chalk.red_bright)

    @property
    def is_error(self) -> bool:
        """True for outcomes that should make the run fail."""
        return self in (UpdateStatus.READ_ERROR, UpdateStatus.WRITE_ERROR)

    @property
    def is_skipped(self) -> bool:
        """True when the file was left alone by policy."""
        return self.name.startswith("SKIPPED_")

    @property
    def changes_file(self) -> bool:
        """True when the file content was (or would be) rewritten."""
        return self in (UpdateStatus.UPDATED, UpdateStatus.WOULD_UPDATE)
