# booking_api/services/cancellation.py

import logging
from datetime import datetime
from typing import Tuple

from fastapi.concurrency import run_in_threadpool
from sqlalchemy import update
from sqlalchemy.orm import selectinload
from sqlmodel import Session, select

from booking_api.core import SystemClock, is_within_cancellation_cutoff
from booking_api.errors import AlreadyCanceled, CutoffExceeded, NotAuthorized, NotFound
from booking_api.jobs.cancellation_mail import JOB_KIND
from booking_api.models import Appointment
from booking_api.queue import JobQueue
from booking_api.schemas import CancellationMailPayload, PartyContact

logger = logging.getLogger(__name__)


def build_mail_payload(appointment: Appointment) -> dict:
    """Freeze the canceled appointment and both parties for the worker."""
    payload = CancellationMailPayload(
        appointment_id=appointment.id,
        requester_id=appointment.requester_id,
        provider_id=appointment.provider_id,
        date=appointment.date,
        canceled_at=appointment.canceled_at,
        created_at=appointment.created_at,
        updated_at=appointment.updated_at,
        provider=PartyContact(name=appointment.provider.name, email=appointment.provider.email),
        requester=PartyContact(name=appointment.requester.name, email=appointment.requester.email),
    )
    return payload.model_dump(mode="json")


def mark_canceled(
    session: Session,
    now: datetime,
    acting_user_id: int,
    appointment_id: int,
) -> Tuple[Appointment, dict]:
    """Run the cancellation rules and persist; returns the row and the mail payload."""
    # 1) Load appointment with both parties for the email
    appointment = session.exec(
        select(Appointment)
        .where(Appointment.id == appointment_id)
        .options(selectinload(Appointment.provider), selectinload(Appointment.requester))
    ).first()
    if appointment is None:
        raise NotFound()

    # 2) Only the requester can cancel
    if appointment.requester_id != acting_user_id:
        raise NotAuthorized()

    # 3) Terminal state
    if appointment.canceled_at is not None:
        raise AlreadyCanceled()

    # 4) Too close to the slot?
    if is_within_cancellation_cutoff(appointment.date, now):
        raise CutoffExceeded()

    # 5) Cancel only if nobody else did since the load
    result = session.execute(
        update(Appointment)
        .where(Appointment.id == appointment_id)
        .where(Appointment.canceled_at == None)  # noqa: E711
        .values(canceled_at=now, updated_at=now)
    )
    if result.rowcount != 1:
        session.rollback()
        logger.info(f"Appointment {appointment_id} was canceled concurrently")
        raise AlreadyCanceled()
    session.commit()

    session.refresh(appointment)
    logger.info(f"Appointment {appointment.id} canceled by user {acting_user_id}")
    return appointment, build_mail_payload(appointment)


async def cancel_appointment(
    session: Session,
    clock: SystemClock,
    queue: JobQueue,
    acting_user_id: int,
    appointment_id: int,
) -> Appointment:
    """
    Cancel an appointment on behalf of the user who booked it.

    Only the requester may cancel, and only while the slot is still more
    than the cutoff away. Cancellation is one-way: a second attempt, even a
    concurrent one, raises AlreadyCanceled and queues nothing. The email job
    is queued after the commit; if queuing fails the cancellation stands.
    """
    appointment, payload = await run_in_threadpool(
        mark_canceled, session, clock.now(), acting_user_id, appointment_id
    )

    # 6) Queue the cancellation email
    try:
        await queue.enqueue(JOB_KIND, payload)
    except Exception as e:
        logger.error(f"Failed to queue cancellation email for appointment {appointment_id}: {e}")

    return appointment
