# topmark:header:start
#
#   project      : auto-header
#   file         : __init__.py
#   file_relpath : src/autoheader/header/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""Header rendering, detection and timestamp helpers."""

from __future__ import annotations

from autoheader.header.composer import build_header, build_header_regex, extract_created_date
from autoheader.header.dates import to_iso, utc_now
from autoheader.header.scanner import HeaderSpan, find_header

__all__ = [
    "HeaderSpan",
    "build_header",
    "build_header_regex",
    "extract_created_date",
    "find_header",
    "to_iso",
    "utc_now",
]
