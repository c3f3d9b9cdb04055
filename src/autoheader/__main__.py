# topmark:header:start
#
#   project      : auto-header
#   file         : __main__.py
#   file_relpath : src/autoheader/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""Module entry point for running auto-header via ``python -m autoheader``.

Delegates to :func:`autoheader.cli.main.cli`, the same Click group that backs
the ``auto-header`` console script.

Examples:
    Update headers of two files::

        python -m autoheader run src/app.js src/util.js
"""

from __future__ import annotations

from autoheader.cli.main import cli

if __name__ == "__main__":
    cli()
