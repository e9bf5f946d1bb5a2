# booking_api/mail.py
"""
SMTP delivery used by the background worker.
"""

import asyncio
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from .config import MAIL_FROM, MAIL_HOST, MAIL_PASS, MAIL_PORT, MAIL_USER

logger = logging.getLogger(__name__)


def _send_smtp(to: str, subject: str, html: str) -> None:
    msg = MIMEMultipart("alternative")
    msg["Subject"] = subject
    msg["From"] = MAIL_FROM
    msg["To"] = to
    msg.attach(MIMEText(html, "html"))

    with smtplib.SMTP(MAIL_HOST, MAIL_PORT, timeout=30) as server:
        if MAIL_USER:
            server.starttls()
            server.login(MAIL_USER, MAIL_PASS or "")
        server.send_message(msg)


async def send_email(to: str, subject: str, html: str) -> None:
    """Send an HTML email without blocking the event loop."""
    logger.info(f"Sending email '{subject}' to {to}")
    await asyncio.to_thread(_send_smtp, to, subject, html)
    logger.info(f"Email sent to {to}")
