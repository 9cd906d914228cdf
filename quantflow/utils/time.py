"""
Epoch-millisecond helpers for price sample timestamps.

Market-data providers report sample times as integer milliseconds since the
Unix epoch. The engine keeps that representation internally and converts to
UTC ``datetime`` only when a caller asks for one.
"""

import math
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Union

from ..errors import InvalidArgumentError

HOUR_MS = 3_600_000


def ms_to_datetime(epoch_ms: int) -> datetime:
    """
    Convert epoch milliseconds to an aware UTC datetime.

    Args:
        epoch_ms: Milliseconds since the Unix epoch

    Returns:
        UTC datetime
    """
    return datetime.fromtimestamp(epoch_ms / 1000.0, tz=timezone.utc)


def datetime_to_ms(ts: datetime) -> int:
    """
    Convert a datetime to epoch milliseconds.

    Naive datetimes are interpreted as UTC.
    """
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return int(round(ts.timestamp() * 1000))


def coerce_epoch_ms(value: Union[int, float, datetime]) -> int:
    """
    Normalize a raw sample time into integer epoch milliseconds.

    Args:
        value: Epoch milliseconds (int or float) or a datetime

    Returns:
        Integer epoch milliseconds

    Raises:
        InvalidArgumentError: If the value is not a usable timestamp
    """
    if isinstance(value, datetime):
        return datetime_to_ms(value)

    # bool is an int subclass but never a timestamp
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(
            f"Invalid timestamp type: {type(value).__name__}",
            argument="time",
            value=value,
        )

    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            raise InvalidArgumentError(f"Invalid timestamp value: {value}", argument="time", value=value)
        return int(value)

    return value


def format_epoch_ms(epoch_ms: int) -> str:
    """Format epoch milliseconds as an ISO8601 UTC string."""
    return ms_to_datetime(epoch_ms).isoformat()


def range_hours(times: Sequence[int]) -> int:
    """
    Whole hours covered by a run of sample times.

    Each sample is taken to cover the mean spacing of the run, so 168 hourly
    samples report 168 hours. A single sample covers no measurable range.
    """
    count = len(times)
    if count < 2:
        return 0
    span_ms = times[-1] - times[0]
    return int(round(span_ms * count / (count - 1) / HOUR_MS))
