# topmark:header:start
#
#   project      : auto-header
#   file         : dates.py
#   file_relpath : src/autoheader/header/dates.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""ISO-8601 timestamp helpers.

Header timestamps are always written in UTC with millisecond precision,
e.g. ``2025-03-14T09:26:53.589Z``. Inputs may be `datetime` objects or
ISO-8601 strings as produced by ``git log --format=%aI`` or by earlier
headers. Naive values are taken to be UTC.
"""

from __future__ import annotations

from datetime import datetime, timezone

from autoheader.errors import InvalidDateError


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def parse_timestamp(value: datetime | str) -> datetime:
    """Parse ``value`` into an aware UTC datetime.

    Args:
        value (datetime | str): A datetime, or an ISO-8601 string (a trailing ``Z`` is accepted).

    Returns:
        datetime: The value converted to UTC.

    Raises:
        InvalidDateError: If ``value`` is not a datetime or a parsable ISO-8601 string.
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str):
        text = value.strip()
        if text[-1:] in ("Z", "z"):
            text = f"{text[:-1]}+00:00"
        try:
            dt = datetime.fromisoformat(text)
        except (ValueError, OverflowError) as exc:
            raise InvalidDateError(value) from exc
    else:
        raise InvalidDateError(value)

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    try:
        return dt.astimezone(timezone.utc)
    except OverflowError as exc:
        # e.g. year 1 with a positive offset falls before datetime.min in UTC
        raise InvalidDateError(value) from exc


def to_iso(value: datetime | str) -> str:
    """Normalize ``value`` to ``YYYY-MM-DDTHH:MM:SS.mmmZ``.

    Raises:
        InvalidDateError: If ``value`` cannot be parsed.
    """
    dt = parse_timestamp(value)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")
