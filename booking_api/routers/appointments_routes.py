# booking_api/routers/appointments_routes.py

from datetime import date
from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from booking_api.db import get_session
from booking_api.auth import get_current_user
from booking_api.core import SystemClock, get_clock
from booking_api.deps import require_provider
from booking_api.queue import JobQueue, get_queue
from booking_api.schemas import (
    AppointmentCreate,
    AppointmentListItem,
    AppointmentPublic,
    ScheduleItem,
)
from booking_api.services.booking import create_appointment
from booking_api.services.cancellation import cancel_appointment
from booking_api.services.listing import list_appointments, provider_schedule


router = APIRouter(
    tags=["appointments"],
)


@router.get("/appointments", response_model=List[AppointmentListItem])
def index_appointments(
    page: int = 1,
    session: Session = Depends(get_session),
    clock: SystemClock = Depends(get_clock),
    current_user: dict = Depends(get_current_user),
):
    return list_appointments(session, clock, current_user["id"], page)


@router.post("/appointments", response_model=AppointmentPublic)
def store_appointment(
    appt: AppointmentCreate,
    session: Session = Depends(get_session),
    clock: SystemClock = Depends(get_clock),
    current_user: dict = Depends(get_current_user),
):
    return create_appointment(
        session,
        clock,
        requester_id=current_user["id"],
        provider_id=appt.provider_id,
        raw_date=appt.date,
    )


@router.delete("/appointments/{appt_id}", response_model=AppointmentPublic)
async def delete_appointment(
    appt_id: int,
    session: Session = Depends(get_session),
    clock: SystemClock = Depends(get_clock),
    queue: JobQueue = Depends(get_queue),
    current_user: dict = Depends(get_current_user),
):
    return await cancel_appointment(
        session,
        clock,
        queue,
        acting_user_id=current_user["id"],
        appointment_id=appt_id,
    )


@router.get("/schedule", response_model=List[ScheduleItem])
def index_schedule(
    date: date,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_provider(current_user)
    return provider_schedule(session, current_user["id"], date)
