# topmark:header:start
#
#   project      : auto-header
#   file         : errors.py
#   file_relpath : src/autoheader/errors.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""Exceptions raised by the auto-header core.

These are plain exceptions with no CLI dependency. The Click layer maps them
onto [`autoheader.cli.errors`][autoheader.cli.errors] with proper exit codes.
"""

from __future__ import annotations


class AutoHeaderError(Exception):
    """Base class for all auto-header errors."""


class ConfigError(AutoHeaderError):
    """Missing, unreadable or invalid configuration document."""


class InvalidDateError(AutoHeaderError, ValueError):
    """A timestamp could not be parsed into an ISO-8601 date."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid date: {value!r}")
        self.value = value


class InstallError(AutoHeaderError):
    """A scaffolding step of ``auto-header install`` failed."""
