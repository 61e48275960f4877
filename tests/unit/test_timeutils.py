"""Unit tests for :mod:`handykit.timeutils`."""

import math
import time
from datetime import date, datetime, timedelta, timezone

import pytest

from handykit.errors import InvalidArgumentError
from handykit.timeutils import (
    convert_to_seconds,
    get_full_year,
    get_unix_timestamp,
    get_unix_timestamp_ms,
)

NEW_YEAR_2024_MS = 1_704_067_200_000


class TestConvertToSeconds:
    """Tests for convert_to_seconds."""

    @staticmethod
    @pytest.mark.parametrize(
        ("kwargs", "expected"),
        [
            ({}, 0),
            ({"seconds": 45}, 45),
            ({"hours": 1, "minutes": 30, "seconds": 45}, 5445),
            ({"days": 1}, 86_400),
            ({"months": 1}, 2_592_000),
            ({"years": 1}, 31_536_000),
            ({"minutes": 1.5}, 90),
        ],
    )
    def test_units(kwargs, expected) -> None:
        """Months are 30 days and years 365 days."""
        assert convert_to_seconds(**kwargs) == expected


class TestGetUnixTimestampMs:
    """Tests for get_unix_timestamp_ms."""

    @staticmethod
    def test_now() -> None:
        """Without an argument the current time is returned."""
        before = time.time_ns() // 1_000_000
        value = get_unix_timestamp_ms()
        after = time.time_ns() // 1_000_000
        assert before <= value <= after

    @staticmethod
    @pytest.mark.parametrize(
        "value",
        [
            datetime(2024, 1, 1, tzinfo=timezone.utc),
            datetime(2024, 1, 1),
            datetime(2024, 1, 1, 2, tzinfo=timezone(timedelta(hours=2))),
            date(2024, 1, 1),
            "2024-01-01T00:00:00Z",
            "2024-01-01T00:00:00+00:00",
            "2024-01-01",
        ],
    )
    def test_dates_and_strings(value) -> None:
        """Aware, naive (UTC) and ISO inputs all map to the same instant."""
        assert get_unix_timestamp_ms(value) == NEW_YEAR_2024_MS

    @staticmethod
    def test_numbers_pass_through() -> None:
        """A valid epoch-milliseconds number is returned as an int."""
        assert get_unix_timestamp_ms(NEW_YEAR_2024_MS) == NEW_YEAR_2024_MS
        assert get_unix_timestamp_ms(1234.9) == 1234
        assert get_unix_timestamp_ms(0) == 0

    @staticmethod
    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_numbers(value) -> None:
        """NaN and infinities are invalid timestamps."""
        with pytest.raises(InvalidArgumentError, match="Invalid timestamp provided"):
            get_unix_timestamp_ms(value)

    @staticmethod
    def test_out_of_range_numbers() -> None:
        """Negative values and values past now + 100 years are rejected."""
        with pytest.raises(InvalidArgumentError, match="Timestamp is outside valid range"):
            get_unix_timestamp_ms(-1)
        far_future = (time.time() + 101 * 365 * 86_400) * 1000
        with pytest.raises(InvalidArgumentError, match="Timestamp is outside valid range"):
            get_unix_timestamp_ms(far_future)

    @staticmethod
    @pytest.mark.parametrize("value", ["not a date", "", "2024-13-45"])
    def test_unparseable_strings(value) -> None:
        """Strings that are not ISO-8601 are rejected."""
        with pytest.raises(InvalidArgumentError, match="Invalid date provided"):
            get_unix_timestamp_ms(value)

    @staticmethod
    @pytest.mark.parametrize("value", [[2024], True])
    def test_other_types(value) -> None:
        """Unsupported types are invalid dates."""
        with pytest.raises(InvalidArgumentError, match="Invalid date provided"):
            get_unix_timestamp_ms(value)


def test_get_unix_timestamp_is_whole_seconds():
    """The seconds variant floors the millisecond value."""
    assert get_unix_timestamp(datetime(2024, 1, 1, 0, 0, 0, 999_000)) == NEW_YEAR_2024_MS // 1000


@pytest.mark.parametrize(
    ("value", "expected"), [(date(1999, 12, 31), 1999), (datetime(2030, 6, 1), 2030)]
)
def test_get_full_year(value, expected):
    """The year of the given date is returned."""
    assert get_full_year(value) == expected


def test_get_full_year_defaults_to_current_utc_year():
    """Without a date the current UTC year is used."""
    assert get_full_year() == datetime.now(timezone.utc).year
