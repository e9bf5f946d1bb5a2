# booking_api/services/booking.py

import logging
from datetime import datetime

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from booking_api.core import SystemClock, format_slot, is_past, truncate_to_hour_start
from booking_api.errors import InvalidProvider, PastDateRejected, SelfBookingNotAllowed, SlotUnavailable
from booking_api.models import Appointment, User
from booking_api.services.availability import has_conflict
from booking_api.services.notifications import notify

logger = logging.getLogger(__name__)


def create_appointment(
    session: Session,
    clock: SystemClock,
    requester_id: int,
    provider_id: int,
    raw_date: datetime,
) -> Appointment:
    """
    Book ``provider_id`` for the hour containing ``raw_date``.

    Checks run in order and the first failing one raises. The provider is
    notified after the booking is committed; a failed notification is logged
    and leaves the booking in place.
    """
    now = clock.now()

    # 1) Target must be a provider
    provider = session.exec(
        select(User).where(User.id == provider_id).where(User.provider == True)  # noqa: E712
    ).first()
    if provider is None:
        raise InvalidProvider()

    # 2) No booking yourself
    if provider_id == requester_id:
        raise SelfBookingNotAllowed()

    # 3) Slot is the start of the hour and must not be in the past
    slot = truncate_to_hour_start(raw_date)
    if is_past(slot, now):
        raise PastDateRejected()

    # 4) Provider must be free at that hour
    if has_conflict(session, provider_id, slot):
        raise SlotUnavailable()

    appointment = Appointment(
        requester_id=requester_id,
        provider_id=provider_id,
        date=slot,
        created_at=now,
        updated_at=now,
    )
    session.add(appointment)
    try:
        session.commit()
    except IntegrityError:
        # a concurrent booking took the slot between the check and the write
        session.rollback()
        logger.info(f"Slot {slot.isoformat()} for provider {provider_id} lost to a concurrent booking")
        raise SlotUnavailable()

    session.refresh(appointment)  # fills appointment.id
    appointment_id = appointment.id
    # keep the committed row loaded whatever happens to the session below
    session.expunge(appointment)
    logger.info(f"Appointment {appointment_id} booked: user {requester_id} -> provider {provider_id} at {slot.isoformat()}")

    # 5) Notify the provider
    try:
        requester = session.get(User, requester_id)
        requester_name = requester.name if requester is not None else f"user {requester_id}"
        notify(
            session,
            clock,
            recipient_id=provider_id,
            content=f"New appointment from {requester_name} on {format_slot(slot)}",
        )
    except Exception as e:
        session.rollback()
        logger.error(f"Failed to notify provider {provider_id} about appointment {appointment_id}: {e}")

    return appointment
