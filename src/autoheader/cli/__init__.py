# topmark:header:start
#
#   project      : auto-header
#   file         : __init__.py
#   file_relpath : src/autoheader/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""Click-based command-line interface for auto-header.

The console script ``auto-header`` maps to [`autoheader.cli.main.cli`][].
"""

from __future__ import annotations
