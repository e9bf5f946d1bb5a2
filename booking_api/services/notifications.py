# booking_api/services/notifications.py

import logging
from typing import List

from sqlmodel import Session, select

from booking_api.core import SystemClock
from booking_api.errors import NotFound
from booking_api.models import Notification

logger = logging.getLogger(__name__)

INBOX_LIMIT = 20


def notify(session: Session, clock: SystemClock, recipient_id: int, content: str) -> Notification:
    notification = Notification(
        content=content,
        recipient_id=recipient_id,
        created_at=clock.now(),
    )
    session.add(notification)
    session.commit()
    session.refresh(notification)
    logger.info(f"Notification {notification.id} created for user {recipient_id}")
    return notification


def list_notifications(session: Session, recipient_id: int) -> List[Notification]:
    return session.exec(
        select(Notification)
        .where(Notification.recipient_id == recipient_id)
        .order_by(Notification.created_at.desc(), Notification.id.desc())
        .limit(INBOX_LIMIT)
    ).all()


def mark_as_read(session: Session, recipient_id: int, notification_id: int) -> Notification:
    notification = session.get(Notification, notification_id)
    # someone else's notification is reported the same as a missing one
    if notification is None or notification.recipient_id != recipient_id:
        raise NotFound("Notification not found")

    notification.read = True
    session.add(notification)
    session.commit()
    session.refresh(notification)
    return notification
