# topmark:header:start
#
#   project      : auto-header
#   file         : __init__.py
#   file_relpath : src/autoheader/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""auto-header package.

auto-header keeps a small author/created/last-modified comment header at the
top of source files. It is meant to run from a pre-commit hook on the staged
files, and exposes a click CLI plus the `process_files` entry point for
automation.
"""

from __future__ import annotations
