# booking_api/services/listing.py

from datetime import datetime, date as Date, time, timedelta
from typing import List, Optional

from sqlalchemy.orm import selectinload
from sqlmodel import Session, select

from booking_api.config import PAGE_SIZE
from booking_api.core import SystemClock, is_past, is_within_cancellation_cutoff
from booking_api.models import Appointment, File, User


def project_avatar(avatar: Optional[File]) -> Optional[dict]:
    if avatar is None:
        return None
    return {"id": avatar.id, "path": avatar.path, "url": avatar.url}


def project_provider(provider: User) -> dict:
    return {"id": provider.id, "name": provider.name, "avatar": project_avatar(provider.avatar)}


def list_appointments(session: Session, clock: SystemClock, user_id: int, page: int = 1) -> List[dict]:
    """A page of the user's active bookings, soonest first."""
    page = max(page, 1)
    now = clock.now()

    appointments = session.exec(
        select(Appointment)
        .where(Appointment.requester_id == user_id)
        .where(Appointment.canceled_at == None)  # noqa: E711
        .order_by(Appointment.date, Appointment.id)
        .limit(PAGE_SIZE)
        .offset((page - 1) * PAGE_SIZE)
        .options(selectinload(Appointment.provider).selectinload(User.avatar))
    ).all()

    return [
        {
            "id": a.id,
            "date": a.date,
            "past": is_past(a.date, now),
            "cancelable": not is_within_cancellation_cutoff(a.date, now),
            "provider": project_provider(a.provider),
        }
        for a in appointments
    ]


def provider_schedule(session: Session, provider_id: int, day: Date) -> List[dict]:
    """The provider's active bookings within one day."""
    day_start_dt = datetime.combine(day, time.min)
    day_end_dt = day_start_dt + timedelta(days=1)

    appointments = session.exec(
        select(Appointment)
        .where(Appointment.provider_id == provider_id)
        .where(Appointment.canceled_at == None)  # noqa: E711
        .where(Appointment.date >= day_start_dt)
        .where(Appointment.date < day_end_dt)
        .order_by(Appointment.date)
        .options(selectinload(Appointment.requester))
    ).all()

    return [
        {
            "id": a.id,
            "date": a.date,
            "requester": {"id": a.requester.id, "name": a.requester.name},
        }
        for a in appointments
    ]


def list_providers(session: Session) -> List[dict]:
    providers = session.exec(
        select(User)
        .where(User.provider == True)  # noqa: E712
        .order_by(User.name)
        .options(selectinload(User.avatar))
    ).all()
    return [project_provider(p) for p in providers]
