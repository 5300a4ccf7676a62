# services/retrieval/time_window.py
from datetime import datetime, timedelta

from core.exceptions import FormatError, InvalidDirectoryName
from core.models import QueryWindow
from shared.utils.timestamps import format_minute, parse_timestamp

# Images are listed for at most this long after the directory timestamp
WINDOW_LENGTH = timedelta(hours=10)

INVALID_DIRECTORY_MESSAGE = (
    "Cannot parse image directory name. Check that the directory name is correct date format."
)


def resolve_window(start_timestamp: str, now: datetime) -> QueryWindow:
    """
    Query window starting at ``start_timestamp`` and ending 10 hours later, or at
    ``now`` when that comes first. ``now`` must be naive, in the same clock as
    the timestamp.

    A start in the future is passed through as is, so ``end_time`` can be
    earlier than ``start_time``.
    """
    try:
        start = parse_timestamp(start_timestamp)
        candidate_end = start + WINDOW_LENGTH
    except (FormatError, OverflowError) as e:
        raise InvalidDirectoryName(INVALID_DIRECTORY_MESSAGE) from e

    return QueryWindow(
        start_time=format_minute(start),
        end_time=format_minute(min(candidate_end, now))
    )
