from __future__ import annotations

from datetime import datetime, timedelta, timezone

from booking_api.core import (
    format_slot,
    is_past,
    is_within_cancellation_cutoff,
    to_reference_clock,
    truncate_to_hour_start,
)


def test_truncate_drops_minutes_seconds_and_microseconds() -> None:
    assert truncate_to_hour_start(datetime(2026, 3, 5, 14, 59, 59, 999)) == datetime(2026, 3, 5, 14, 0)


def test_same_clock_hour_maps_to_same_slot() -> None:
    assert truncate_to_hour_start(datetime(2026, 3, 5, 14, 1)) == truncate_to_hour_start(datetime(2026, 3, 5, 14, 58))


def test_truncate_normalizes_aware_datetimes_to_utc() -> None:
    aware = datetime(2026, 3, 5, 11, 30, tzinfo=timezone(timedelta(hours=-3)))
    assert truncate_to_hour_start(aware) == datetime(2026, 3, 5, 14, 0)
    assert truncate_to_hour_start(aware).tzinfo is None


def test_naive_datetimes_are_kept_as_utc() -> None:
    naive = datetime(2026, 3, 5, 11, 30)
    assert to_reference_clock(naive) is naive


def test_is_past_is_strict() -> None:
    now = datetime(2026, 3, 2, 10, 0)
    assert is_past(now - timedelta(seconds=1), now)
    assert not is_past(now, now)
    assert not is_past(now + timedelta(minutes=1), now)


def test_cutoff_blocks_less_than_two_hours_ahead() -> None:
    now = datetime(2026, 3, 2, 10, 0)
    assert is_within_cancellation_cutoff(datetime(2026, 3, 2, 11, 59), now)
    assert is_within_cancellation_cutoff(datetime(2026, 3, 2, 9, 0), now)


def test_cutoff_allows_exactly_two_hours_or_more() -> None:
    now = datetime(2026, 3, 2, 10, 0)
    assert not is_within_cancellation_cutoff(datetime(2026, 3, 2, 12, 0), now)
    assert not is_within_cancellation_cutoff(datetime(2026, 3, 3, 12, 0), now)


def test_cutoff_hours_can_be_overridden() -> None:
    now = datetime(2026, 3, 2, 10, 0)
    assert is_within_cancellation_cutoff(datetime(2026, 3, 2, 12, 0), now, cutoff_hours=3)


def test_format_slot() -> None:
    assert format_slot(datetime(2026, 3, 5, 9, 0)) == "March 05, at 9:00h"
