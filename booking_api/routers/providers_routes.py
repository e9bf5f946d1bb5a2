# booking_api/routers/providers_routes.py

from datetime import date
from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from booking_api.db import get_session
from booking_api.auth import get_current_user
from booking_api.core import SystemClock, get_clock
from booking_api.errors import NotFound
from booking_api.models import User
from booking_api.schemas import AvailableSlot, ProviderPublic
from booking_api.services.availability import available_slots
from booking_api.services.listing import list_providers

router = APIRouter(
    prefix="/providers",
    tags=["providers"],
)


@router.get("", response_model=List[ProviderPublic])
def index_providers(
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    return list_providers(session)


@router.get("/{provider_id}/available", response_model=List[AvailableSlot])
def provider_availability(
    provider_id: int,
    date: date,
    session: Session = Depends(get_session),
    clock: SystemClock = Depends(get_clock),
    current_user: dict = Depends(get_current_user),
):
    provider = session.get(User, provider_id)
    if provider is None or not provider.provider:
        raise NotFound("Provider not found")

    return available_slots(session, provider_id, date, clock.now())
