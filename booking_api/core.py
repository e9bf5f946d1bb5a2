# booking_api/core.py
"""
Time rules shared by the booking, cancellation and listing services.

Every instant handled here is a naive datetime on the UTC reference clock.
Callers pass ``now`` explicitly so the rules stay pure.
"""

from datetime import datetime, timedelta, timezone

from .config import CANCELLATION_CUTOFF_HOURS


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class SystemClock:
    """Wall clock used in production; tests swap it through get_clock."""

    def now(self) -> datetime:
        return utcnow()


_system_clock = SystemClock()


# Dependency: current time source
def get_clock() -> SystemClock:
    return _system_clock


def to_reference_clock(instant: datetime) -> datetime:
    """Convert aware datetimes to naive UTC; naive ones are assumed UTC already."""
    if instant.tzinfo is not None:
        return instant.astimezone(timezone.utc).replace(tzinfo=None)
    return instant


def truncate_to_hour_start(instant: datetime) -> datetime:
    return to_reference_clock(instant).replace(minute=0, second=0, microsecond=0)


def is_past(instant: datetime, now: datetime) -> bool:
    return instant < now


def is_within_cancellation_cutoff(
    appointment_instant: datetime,
    now: datetime,
    cutoff_hours: int = CANCELLATION_CUTOFF_HOURS,
) -> bool:
    """True when it is already too late to cancel."""
    return appointment_instant - timedelta(hours=cutoff_hours) < now


def format_slot(instant: datetime) -> str:
    # e.g. "March 05, at 14:00h"
    return f"{instant:%B %d}, at {instant.hour}:{instant:%M}h"
