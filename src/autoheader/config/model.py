# topmark:header:start
#
#   project      : auto-header
#   file         : model.py
#   file_relpath : src/autoheader/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""Typed configuration models for auto-header.

Two documents configure a run:

- the *global* configuration (``auto-header.config.json``, versioned with the
  project) lists the enabled file extensions and the comment style used for
  each of them;
- the *local* configuration (``.auto-header-local.json``, ignored by git)
  holds the author name and email written into headers.

Both are parsed from plain dicts (see [`autoheader.config.io`][autoheader.config.io])
into frozen dataclasses. Validation errors raise
[`ConfigError`][autoheader.errors.ConfigError].
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Union

from autoheader.config.logging import get_logger
from autoheader.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from autoheader.config.logging import AutoHeaderLogger

logger: AutoHeaderLogger = get_logger(__name__)


class CommentKind(str, Enum):
    """Comment style families accepted in ``commentStyle`` entries."""

    BLOCK = "block"
    LINE = "line"


@dataclass(frozen=True, slots=True)
class BlockCommentStyle:
    """Block comment wrapped in fences, inner lines carrying a prefix.

    Attributes:
        start (str): Opening fence, e.g. ``/*``.
        end (str): Closing fence, e.g. ``*/``.
        line (str): Prefix of each inner line, e.g. `` *``.
    """

    start: str
    end: str
    line: str

    @property
    def kind(self) -> CommentKind:
        """The comment family of this style."""
        return CommentKind.BLOCK


@dataclass(frozen=True, slots=True)
class LineCommentStyle:
    """Line comments, every header line prefixed with ``start`` (e.g. ``//``, ``#``)."""

    start: str

    @property
    def kind(self) -> CommentKind:
        """The comment family of this style."""
        return CommentKind.LINE


CommentStyle = Union[BlockCommentStyle, LineCommentStyle]


def _require_str(entry: Mapping[str, Any], key: str, where: str) -> str:
    value = entry.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{where}: '{key}' must be a non-empty string")
    return value


def _require_line_prefix(entry: Mapping[str, Any], where: str) -> str:
    # An empty prefix is valid (e.g. HTML comments with bare inner lines)
    value = entry.get("line")
    if not isinstance(value, str):
        raise ConfigError(f"{where}: 'line' must be a string")
    return value


def comment_style_from_dict(entry: Mapping[str, Any], *, where: str) -> CommentStyle:
    """Build a comment style from its JSON shape ``{type, start, end?, line?}``.

    Args:
        entry (Mapping[str, Any]): The raw ``commentStyle`` entry.
        where (str): Location used in error messages (e.g. ``commentStyle[".js"]``).

    Returns:
        CommentStyle: The parsed style.

    Raises:
        ConfigError: If the type is unknown or a required key is missing.
    """
    raw_type = entry.get("type", CommentKind.LINE.value)
    try:
        kind = CommentKind(str(raw_type).lower())
    except ValueError as exc:
        raise ConfigError(f"{where}: unknown comment style type {raw_type!r}") from exc

    start = _require_str(entry, "start", where)
    if kind is CommentKind.BLOCK:
        return BlockCommentStyle(
            start=start,
            end=_require_str(entry, "end", where),
            line=_require_line_prefix(entry, where),
        )
    return LineCommentStyle(start=start)


def normalize_extension(ext: str) -> str:
    """Return ``ext`` with a single leading dot (``"js"`` and ``".js"`` both give ``".js"``)."""
    ext = ext.strip()
    return ext if ext.startswith(".") else f".{ext}"


@dataclass(frozen=True, slots=True)
class GlobalConfig:
    """Project-wide configuration: enabled extensions and their comment styles.

    Attributes:
        extensions (frozenset[str]): Enabled extensions, each with a leading dot.
        comment_styles (Mapping[str, CommentStyle]): Comment style per extension.
        exclude (tuple[str, ...]): Gitignore-style patterns of files never touched.
        vcs_timeout (float | None): Seconds to wait for git history lookups (None: no limit).
    """

    extensions: frozenset[str]
    comment_styles: Mapping[str, CommentStyle] = field(
        default_factory=lambda: MappingProxyType({})
    )
    exclude: tuple[str, ...] = ()
    vcs_timeout: float | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, source: str = "<config>") -> GlobalConfig:
        """Parse the global configuration document.

        Args:
            data (Mapping[str, Any]): Parsed JSON (or TOML table) content.
            source (str): Name of the document, used in error messages.

        Returns:
            GlobalConfig: The validated configuration.

        Raises:
            ConfigError: If the document shape is invalid.
        """
        raw_exts = data.get("extensions")
        if not isinstance(raw_exts, list) or not all(isinstance(e, str) for e in raw_exts):
            raise ConfigError(f"{source}: 'extensions' must be a list of strings")
        extensions = frozenset(normalize_extension(e) for e in raw_exts if e.strip())

        raw_styles = data.get("commentStyle", {})
        if not isinstance(raw_styles, dict):
            raise ConfigError(f"{source}: 'commentStyle' must be an object")
        styles: dict[str, CommentStyle] = {}
        for ext, entry in raw_styles.items():
            if not isinstance(entry, dict):
                raise ConfigError(f"{source}: commentStyle[{ext!r}] must be an object")
            styles[normalize_extension(ext)] = comment_style_from_dict(
                entry, where=f"{source}: commentStyle[{ext!r}]"
            )

        raw_exclude = data.get("exclude", [])
        if not isinstance(raw_exclude, list) or not all(isinstance(p, str) for p in raw_exclude):
            raise ConfigError(f"{source}: 'exclude' must be a list of strings")

        raw_timeout = data.get("vcsTimeout")
        if raw_timeout is not None and (
            isinstance(raw_timeout, bool)
            or not isinstance(raw_timeout, (int, float))
            or raw_timeout <= 0
        ):
            raise ConfigError(f"{source}: 'vcsTimeout' must be a positive number of seconds")

        missing: list[str] = sorted(extensions.difference(styles))
        if missing:
            logger.warning(
                "%s: no comment style for enabled extension(s) %s; such files are skipped",
                source,
                ", ".join(missing),
            )

        return cls(
            extensions=extensions,
            comment_styles=MappingProxyType(styles),
            exclude=tuple(raw_exclude),
            vcs_timeout=float(raw_timeout) if raw_timeout is not None else None,
        )


@dataclass(frozen=True, slots=True)
class HeaderConfig:
    """Per-developer identity written into headers."""

    author: str
    email: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, source: str = "<config>") -> HeaderConfig:
        """Parse the local configuration document.

        Raises:
            ConfigError: If ``author`` or ``email`` is missing or empty.
        """
        missing: list[str] = [
            key
            for key in ("author", "email")
            if not isinstance(data.get(key), str) or not str(data.get(key)).strip()
        ]
        if missing:
            raise ConfigError(
                f"{source}: author name or email not configured (missing: {', '.join(missing)})"
            )
        return cls(author=str(data["author"]).strip(), email=str(data["email"]).strip())

