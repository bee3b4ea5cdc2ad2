"""
Formatting of listing records into output lines.

Every function here is pure: no backend access, no styling. Directory versus
file distinction in short format is left to the caller through ``Record.kind``.
"""

from datetime import datetime, timezone
from typing import Optional

from storage_ls.entities.record import Record

SIZE_WIDTH = 10
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
TIMESTAMP_WIDTH = 19

DIRECTORY_FLAG = "d"
FILE_FLAG = "-"


def format_timestamp(timestamp: Optional[int]) -> str:
    """
    Format a Unix timestamp as ``YYYY-MM-DD HH:MM:SS`` in UTC.

    Unavailable timestamps become blank padding of the same width.
    """
    if timestamp is None:
        return " " * TIMESTAMP_WIDTH
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime(
        TIMESTAMP_FORMAT
    )


def render(record: Record, long_format: bool) -> str:
    """
    Render one record.

    Args:
        record: Resolved record
        long_format: Whether to include type flag, size and timestamp

    Returns:
        The output line, without trailing newline
    """
    if not long_format:
        return record.basename

    flag = DIRECTORY_FLAG if record.is_dir else FILE_FLAG
    size = record.size if record.size is not None else 0
    return (
        f"{flag} {size:>{SIZE_WIDTH}d} "
        f"{format_timestamp(record.modified_at)} {record.basename}"
    )


def header(path: str) -> str:
    """Directory header used in recursive listings (``/`` for the root)."""
    return f"{path.strip('/') or '/'}:"
