# booking_api/routers/notifications_routes.py

from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from booking_api.db import get_session
from booking_api.auth import get_current_user
from booking_api.deps import require_provider
from booking_api.schemas import NotificationPublic
from booking_api.services.notifications import list_notifications, mark_as_read

router = APIRouter(
    prefix="/notifications",
    tags=["notifications"],
)


@router.get("", response_model=List[NotificationPublic])
def index_notifications(
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_provider(current_user)
    return list_notifications(session, current_user["id"])


@router.put("/{notification_id}", response_model=NotificationPublic)
def read_notification(
    notification_id: int,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    return mark_as_read(session, current_user["id"], notification_id)
