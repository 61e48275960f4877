"""Time-unit conversion and unix timestamp helpers.

All timestamps are UTC. Naive ``datetime`` values and ISO-8601 strings
without an offset are interpreted as UTC, never as local time.
"""

from __future__ import annotations

import math
import time
from datetime import date as date_type
from datetime import datetime, timezone

from .errors import InvalidArgumentError

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * 60
SECONDS_PER_DAY = 60 * 60 * 24
SECONDS_PER_MONTH = SECONDS_PER_DAY * 30  # fixed 30-day month
SECONDS_PER_YEAR = SECONDS_PER_DAY * 365  # fixed 365-day year

MAX_FUTURE_MS = 100 * 365 * SECONDS_PER_DAY * 1000

DateInput = datetime | date_type | str | int | float


def convert_to_seconds(
    *,
    seconds: float = 0,
    minutes: float = 0,
    hours: float = 0,
    days: float = 0,
    months: float = 0,
    years: float = 0,
) -> float:
    """Sum the given time units into a number of seconds.

    Months count as 30 days and years as 365 days.

    Examples:
        ```py
        >>> convert_to_seconds(hours=1, minutes=30, seconds=45)
        5445
        ```
    """
    return (
        seconds
        + minutes * SECONDS_PER_MINUTE
        + hours * SECONDS_PER_HOUR
        + days * SECONDS_PER_DAY
        + months * SECONDS_PER_MONTH
        + years * SECONDS_PER_YEAR
    )


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def _as_utc(dt: datetime) -> datetime:
    return dt.replace(tzinfo=timezone.utc) if dt.tzinfo is None else dt


def get_unix_timestamp_ms(date: DateInput | None = None) -> int:
    """Return a unix timestamp in milliseconds.

    Args:
        date: ``None`` for now; a number is taken as epoch milliseconds and
            validated; a ``datetime``, ``date`` or ISO-8601 string is converted.

    Returns:
        int: Milliseconds since the epoch.

    Raises:
        InvalidArgumentError: If a number is not finite ("Invalid timestamp
            provided") or falls outside ``[0, now + 100 years]``, or a string
            cannot be parsed ("Invalid date provided").
    """
    if date is None:
        return _now_ms()

    if isinstance(date, (int, float)) and not isinstance(date, bool):
        if not math.isfinite(date):
            raise InvalidArgumentError("Invalid timestamp provided")
        if date < 0 or date > _now_ms() + MAX_FUTURE_MS:
            raise InvalidArgumentError("Timestamp is outside valid range")
        return int(date)

    if isinstance(date, str):
        try:
            date = datetime.fromisoformat(date.strip())
        except ValueError as e:
            raise InvalidArgumentError("Invalid date provided") from e

    if isinstance(date, datetime):
        return math.floor(_as_utc(date).timestamp() * 1000)
    if isinstance(date, date_type):
        midnight = datetime(date.year, date.month, date.day, tzinfo=timezone.utc)
        return math.floor(midnight.timestamp() * 1000)
    raise InvalidArgumentError("Invalid date provided")


def get_unix_timestamp(date: DateInput | None = None) -> int:
    """Return a unix timestamp in whole seconds (see :func:`get_unix_timestamp_ms`)."""
    return get_unix_timestamp_ms(date) // 1000


def get_full_year(date: date_type | None = None) -> int:
    """Return the four-digit year of ``date``, or the current UTC year."""
    target = date if date is not None else datetime.now(timezone.utc)
    return target.year
