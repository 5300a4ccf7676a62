"""Unit tests for query window resolution."""

from datetime import datetime, timedelta

import pytest

from core.exceptions import InvalidDirectoryName
from core.models import QueryWindow
from services.retrieval.time_window import resolve_window
from shared.utils.timestamps import format_minute, parse_timestamp

START = "20230126050000000"


class TestResolveWindow:
    """Tests for resolve_window."""

    def test_full_ten_hour_window_in_the_past(self):
        window = resolve_window(START, now=datetime(2024, 1, 1))

        assert window == QueryWindow(start_time="202301260500", end_time="202301261500")

    def test_end_capped_at_now(self):
        window = resolve_window(START, now=datetime(2023, 1, 26, 9, 30, 59))

        assert window == QueryWindow(start_time="202301260500", end_time="202301260930")

    def test_start_drops_seconds_and_milliseconds(self):
        window = resolve_window("20230126052344873", now=datetime(2024, 1, 1))

        assert window.start_time == "202301260523"
        assert window.end_time == "202301261523"

    def test_window_crosses_midnight(self):
        window = resolve_window("20231231200000000", now=datetime(2025, 1, 1))

        assert window.end_time == "202401010600"

    def test_future_start_is_not_validated(self):
        """A start after now yields an end earlier than the start."""
        window = resolve_window("20300101000000000", now=datetime(2023, 1, 26, 5, 0))

        assert window == QueryWindow(start_time="203001010000", end_time="202301260500")
        assert window.end_time < window.start_time

    @pytest.mark.parametrize("value", ["", "not-a-date", "2023012605", "00000101000000000"])
    def test_invalid_directory_name(self, value):
        with pytest.raises(InvalidDirectoryName, match="Cannot parse image directory name"):
            resolve_window(value, now=datetime(2024, 1, 1))

    def test_end_overflow_is_invalid_directory_name(self):
        with pytest.raises(InvalidDirectoryName):
            resolve_window("99991231230000000", now=datetime(2024, 1, 1))

    @pytest.mark.parametrize(
        "timestamp,now",
        [
            (START, datetime(2023, 1, 26, 6, 0)),
            (START, datetime(2023, 1, 27)),
            ("20230126052344873", datetime(2023, 1, 26, 5, 24)),
            ("20300101000000000", datetime(2023, 1, 1)),
        ],
    )
    def test_end_never_after_now_or_ten_hours(self, timestamp, now):
        window = resolve_window(timestamp, now=now)

        assert window.end_time <= format_minute(now)
        assert window.end_time <= format_minute(parse_timestamp(timestamp) + timedelta(hours=10))
