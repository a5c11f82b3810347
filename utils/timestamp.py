"""Millisecond timestamp utilities."""

import time
from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
# 9999-12-31T23:59:59.999Z, the last instant datetime can hold
MAX_DATETIME_MILLIS = 253402300799999


def now_millis():
    """Current time in milliseconds since Unix epoch."""
    return time.time_ns() // 1_000_000


def to_datetime(epoch_ms):
    """UTC datetime for a millisecond timestamp, or None past year 9999."""
    if epoch_ms > MAX_DATETIME_MILLIS:
        return None
    return EPOCH + timedelta(milliseconds=epoch_ms)


def _civil_from_days(days):
    """Proleptic Gregorian (year, month, day) for days since 1970-01-01."""
    days += 719468
    era = days // 146097
    day_of_era = days - era * 146097
    year_of_era = (day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400 + (month <= 2)
    return year, month, day


def format_timestamp(epoch_ms=None):
    """Format timestamp as ISO 8601 with milliseconds.

    Years past 9999 use the expanded form, e.g. ``+10889-08-02T05:31:50.655Z``.
    """
    if epoch_ms is None:
        epoch_ms = now_millis()

    seconds, millis = divmod(epoch_ms, 1000)
    if epoch_ms <= MAX_DATETIME_MILLIS:
        dt = EPOCH + timedelta(seconds=seconds)
        return dt.strftime("%Y-%m-%dT%H:%M:%S") + f".{millis:03d}Z"

    days, day_seconds = divmod(seconds, 86400)
    year, month, day = _civil_from_days(days)
    hours, rest = divmod(day_seconds, 3600)
    minutes, secs = divmod(rest, 60)
    return f"+{year}-{month:02d}-{day:02d}T{hours:02d}:{minutes:02d}:{secs:02d}.{millis:03d}Z"
