"""Nanosecond timestamp and tick size utilities."""

import time
from datetime import datetime, timedelta, timezone

NANOSECOND = 1
MICROSECOND = 1_000 * NANOSECOND
MILLISECOND = 1_000 * MICROSECOND
CENTISECOND = 10 * MILLISECOND
DECISECOND = 100 * MILLISECOND
SECOND = 1_000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR

TICK_SIZES = {
    "nanosecond": NANOSECOND,
    "microsecond": MICROSECOND,
    "millisecond": MILLISECOND,
    "centisecond": CENTISECOND,
    "decisecond": DECISECOND,
    "second": SECOND,
    "minute": MINUTE,
    "hour": HOUR,
    "day": DAY,
}

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_ONE_MICROSECOND = timedelta(microseconds=1)


def now_nanos():
    """Current time in nanoseconds since Unix epoch."""
    return time.time_ns()


def now_micros():
    """Current time in microseconds since Unix epoch."""
    return time.time_ns() // 1_000


def to_utc(moment):
    """Return ``moment`` in UTC. Naive datetimes are taken to be UTC already."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def to_nanos(moment):
    """Convert a datetime or integer nanoseconds to nanoseconds since Unix epoch."""
    if isinstance(moment, datetime):
        return ((to_utc(moment) - UNIX_EPOCH) // _ONE_MICROSECOND) * MICROSECOND
    if isinstance(moment, int) and not isinstance(moment, bool):
        return moment
    raise TypeError(f"expected datetime or int nanoseconds, got {type(moment).__name__}")


def from_nanos(nanos):
    """UTC datetime for nanoseconds since Unix epoch (truncated to microseconds)."""
    return UNIX_EPOCH + timedelta(microseconds=nanos // MICROSECOND)


def to_duration_nanos(duration):
    """Convert an int, timedelta or tick size name to integer nanoseconds."""
    if isinstance(duration, timedelta):
        return (duration // _ONE_MICROSECOND) * MICROSECOND
    if isinstance(duration, str):
        try:
            return TICK_SIZES[duration.lower()]
        except KeyError:
            raise ValueError(f"unknown tick size {duration!r}") from None
    if isinstance(duration, int) and not isinstance(duration, bool):
        return duration
    raise TypeError(f"expected int nanoseconds, timedelta or name, got {type(duration).__name__}")


def format_timestamp(epoch_us=None):
    """Format timestamp as ISO 8601 with microseconds."""
    if epoch_us is None:
        epoch_us = now_micros()

    dt = UNIX_EPOCH + timedelta(microseconds=epoch_us)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"
