"""Time-related helpers."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

_TICK = timedelta(microseconds=1)


def utc_now() -> datetime:
    """Return a timezone-aware UTC timestamp."""

    return datetime.now(UTC)


def ensure_utc(value: datetime) -> datetime:
    """Normalize a datetime to UTC."""

    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def next_timestamp(previous: datetime | None) -> datetime:
    """Return the current time, nudged forward so it is strictly after ``previous``.

    Two writes landing in the same clock tick would otherwise share a
    modification timestamp.
    """

    now = utc_now()
    if previous is None:
        return now
    floor = ensure_utc(previous) + _TICK
    return now if now >= floor else floor
