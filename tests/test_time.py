from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

from brewstore.utils import ensure_utc, next_timestamp, utc_now


def test_next_timestamp_without_previous_is_now() -> None:
    before = utc_now()
    stamp = next_timestamp(None)

    assert stamp >= before
    assert stamp.tzinfo is not None


def test_next_timestamp_steps_past_a_previous_in_the_future() -> None:
    previous = utc_now() + timedelta(seconds=5)

    stamp = next_timestamp(previous)

    assert stamp > previous
    assert stamp == previous + timedelta(microseconds=1)


def test_next_timestamp_treats_naive_previous_as_utc() -> None:
    previous = (utc_now() + timedelta(seconds=5)).replace(tzinfo=None)

    stamp = next_timestamp(previous)

    assert stamp > ensure_utc(previous)
    assert stamp.tzinfo == UTC


def test_ensure_utc_converts_offsets() -> None:
    plus_two = datetime(2024, 1, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))

    converted = ensure_utc(plus_two)

    assert converted == datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
    assert converted.tzinfo == UTC
