# shared/utils/timestamps.py
"""
Conversions for the fixed-width timestamps used by the Console.

Image files and image directories are named ``yyyyMMddHHmmssfff`` (17 digits)
and the image listing takes its window bounds as ``yyyyMMddHHmm``. Timestamps
carry no timezone; they are handled as naive datetimes.
"""

import re
from datetime import datetime, timedelta

from core.exceptions import FormatError

TIMESTAMP_LENGTH = 17

_TIMESTAMP_PATTERN = re.compile(r"[0-9]{17}")


def _add_months(year: int, month_index: int) -> datetime:
    """First day of the month ``month_index`` months after January of ``year``"""
    year += month_index // 12
    return datetime(year, month_index % 12 + 1, 1)


def parse_timestamp(timestamp: str) -> datetime:
    """
    Parse a 17-digit timestamp into a naive datetime.

    Components outside their calendar range roll over into the next larger
    unit instead of failing (``20231301...`` is January 2024, day ``00`` is the
    last day of the previous month), matching how the storage side builds
    these names from a lenient date constructor.

    Raises:
        FormatError: not exactly 17 digits, or the year is out of range
    """
    if not isinstance(timestamp, str) or not _TIMESTAMP_PATTERN.fullmatch(timestamp):
        raise FormatError(f"Timestamp must be {TIMESTAMP_LENGTH} digits (yyyyMMddHHmmssfff): {timestamp!r}")

    year = int(timestamp[0:4])
    month = int(timestamp[4:6])
    day = int(timestamp[6:8])
    hour = int(timestamp[8:10])
    minute = int(timestamp[10:12])
    second = int(timestamp[12:14])
    millisecond = int(timestamp[14:17])

    try:
        month_start = _add_months(year, month - 1)
        return month_start + timedelta(
            days=day - 1,
            hours=hour,
            minutes=minute,
            seconds=second,
            milliseconds=millisecond
        )
    except (ValueError, OverflowError) as e:
        raise FormatError(f"Timestamp is out of range: {timestamp!r}") from e


def format_minute(instant: datetime) -> str:
    """Render as yyyyMMddHHmm"""
    return f"{instant.year:04d}{instant.strftime('%m%d%H%M')}"


def format_timestamp(instant: datetime) -> str:
    """Render as the full 17-digit yyyyMMddHHmmssfff form"""
    return f"{instant.year:04d}{instant.strftime('%m%d%H%M%S')}{instant.microsecond // 1000:03d}"
