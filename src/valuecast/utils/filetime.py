"""Windows FILETIME conversion: 100-nanosecond ticks since 1601-01-01 UTC."""

from __future__ import annotations

from datetime import datetime, timezone

FILETIME_EPOCH = datetime(1601, 1, 1, tzinfo=timezone.utc)
TICKS_PER_SECOND = 10_000_000
TICKS_PER_MICROSECOND = 10


def to_file_time_utc(dt: datetime) -> int:
    """FILETIME of ``dt``; naive datetimes are taken as UTC. May be negative."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    delta = dt - FILETIME_EPOCH
    seconds = delta.days * 86_400 + delta.seconds
    return seconds * TICKS_PER_SECOND + delta.microseconds * TICKS_PER_MICROSECOND


def to_file_time(dt: datetime) -> int:
    """FILETIME of ``dt``; naive datetimes are taken as local time. May be negative."""
    return to_file_time_utc(dt.astimezone(timezone.utc))


def to_positive_file_time(dt: datetime) -> int:
    return max(to_file_time(dt), 0)


def to_positive_file_time_utc(dt: datetime) -> int:
    return max(to_file_time_utc(dt), 0)
