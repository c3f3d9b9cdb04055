# topmark:header:start
#
#   project      : auto-header
#   file         : __init__.py
#   file_relpath : src/autoheader/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""Subcommands of the auto-header CLI."""
