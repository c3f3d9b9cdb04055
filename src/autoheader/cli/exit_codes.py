# topmark:header:start
#
#   project      : auto-header
#   file         : exit_codes.py
#   file_relpath : src/autoheader/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""Exit codes for the auto-header CLI.

auto-header aligns with the BSD `sysexits` convention where practical. The
one divergence is ``WOULD_CHANGE = 2``, returned by ``run --dry-run`` when
files would be updated; Click also uses 2 for usage errors, so tests must
check ``result.exception is None`` to tell them apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the auto-header CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (e.g. an installation step failed).
        WOULD_CHANGE: Dry-run: files would be updated without ``--dry-run``.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        IO_ERROR: One or more files could not be read or written. Mirrors
            BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Missing or invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see module docstring

    USAGE_ERROR = 64  # EX_USAGE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
