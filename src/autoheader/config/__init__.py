# topmark:header:start
#
#   project      : auto-header
#   file         : __init__.py
#   file_relpath : src/autoheader/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""Configuration models and loaders for auto-header."""

from __future__ import annotations

from autoheader.config.io import Settings, load_global_config, load_header_config, load_settings
from autoheader.config.model import (
    BlockCommentStyle,
    CommentKind,
    CommentStyle,
    GlobalConfig,
    HeaderConfig,
    LineCommentStyle,
)

__all__ = [
    "BlockCommentStyle",
    "CommentKind",
    "CommentStyle",
    "GlobalConfig",
    "HeaderConfig",
    "LineCommentStyle",
    "Settings",
    "load_global_config",
    "load_header_config",
    "load_settings",
]
