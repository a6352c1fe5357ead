"""Datetime helpers."""

from datetime import datetime, timedelta, timezone as dt_timezone

from django.utils import timezone

EPOCH = datetime(1970, 1, 1, tzinfo=dt_timezone.utc)


def round_time(value: datetime, resolution: timedelta = timedelta(minutes=1)) -> datetime:
    """Round ``value`` to the nearest multiple of ``resolution`` since the epoch."""
    step = resolution.total_seconds()
    if step <= 0:
        return value
    if timezone.is_naive(value):
        value = timezone.make_aware(value, dt_timezone.utc)
    seconds = (value - EPOCH).total_seconds()
    return EPOCH + timedelta(seconds=round(seconds / step) * step)
