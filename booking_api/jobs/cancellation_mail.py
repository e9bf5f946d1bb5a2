# booking_api/jobs/cancellation_mail.py

import logging
from datetime import datetime
from html import escape

from booking_api.core import format_slot
from booking_api.mail import send_email
from booking_api.schemas import CancellationMailPayload

logger = logging.getLogger(__name__)

JOB_KIND = "send_cancellation_mail"


def cancellation_template(provider_name: str, requester_name: str, date: datetime) -> str:
    return f"""
<p>Hello, {escape(provider_name)}</p>
<p>An appointment has been canceled.</p>
<p>
  <strong>Customer:</strong> {escape(requester_name)}<br>
  <strong>Date:</strong> {escape(format_slot(date))}
</p>
<p>The time slot is available for new bookings again.</p>
""".strip()


async def send_cancellation_mail(ctx, payload: dict) -> dict:
    """
    ARQ task: email the provider that a booking was canceled.

    Args:
        ctx: ARQ context
        payload: CancellationMailPayload dumped to JSON-compatible dict

    Returns:
        dict with the appointment id and recipient
    """
    data = CancellationMailPayload.model_validate(payload)
    if not data.provider.email:
        logger.warning(f"No provider email for appointment {data.appointment_id} - skipping cancellation email")
        return {"appointment_id": data.appointment_id, "sent": False}

    await send_email(
        to=f"{data.provider.name} <{data.provider.email}>",
        subject="Appointment canceled",
        html=cancellation_template(data.provider.name, data.requester.name, data.date),
    )
    return {"appointment_id": data.appointment_id, "sent": True, "to": data.provider.email}
