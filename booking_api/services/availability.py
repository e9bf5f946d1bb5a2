# booking_api/services/availability.py

from datetime import datetime, date as Date, time, timedelta
from typing import List

from sqlmodel import Session, select

from booking_api.config import SCHEDULE_HOURS
from booking_api.core import is_past
from booking_api.models import Appointment


def has_conflict(session: Session, provider_id: int, slot: datetime) -> bool:
    """A non-canceled booking already holds this provider's hour."""
    existing = session.exec(
        select(Appointment)
        .where(Appointment.provider_id == provider_id)
        .where(Appointment.canceled_at == None)  # noqa: E711
        .where(Appointment.date == slot)
    ).first()
    return existing is not None


def available_slots(session: Session, provider_id: int, day: Date, now: datetime) -> List[dict]:
    """Bookable hours of ``day`` for a provider, flagged by availability."""
    day_start_dt = datetime.combine(day, time.min)
    day_end_dt = day_start_dt + timedelta(days=1)

    booked = session.exec(
        select(Appointment.date)
        .where(Appointment.provider_id == provider_id)
        .where(Appointment.canceled_at == None)  # noqa: E711
        .where(Appointment.date >= day_start_dt)
        .where(Appointment.date < day_end_dt)
    ).all()
    booked = set(booked)

    slots = []
    for hour in SCHEDULE_HOURS:
        slot = datetime.combine(day, time(hour=hour))
        slots.append(
            {
                "time": slot.strftime("%H:%M"),
                "value": slot,
                "available": not is_past(slot, now) and slot not in booked,
            }
        )
    return slots
