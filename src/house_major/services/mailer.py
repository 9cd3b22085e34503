"""Outgoing email over SMTP.

When SMTP is not configured the message is logged and dropped, which keeps
local development and tests free of network access.
"""

from __future__ import annotations

import html
import logging
import smtplib
from email.message import EmailMessage

from house_major.config import get_contact_inbox, get_smtp_settings
from house_major.services.errors import MailDeliveryError

logger = logging.getLogger(__name__)

SENDER_NAME = "House Major"


def send_email(to: str, subject: str, html_body: str, reply_to: str | None = None) -> None:
    """Send one HTML email.

    Raises:
        MailDeliveryError: If the SMTP server refused or could not be reached.
    """
    settings = get_smtp_settings()
    if settings is None:
        logger.info("SMTP not configured; dropping email %r to %s", subject, to)
        return

    msg = EmailMessage()
    msg["From"] = f'"{SENDER_NAME}" <{settings["sender"]}>'
    msg["To"] = to
    msg["Subject"] = subject
    if reply_to:
        msg["Reply-To"] = reply_to
    msg.set_content("This message requires an HTML-capable mail client.")
    msg.add_alternative(html_body, subtype="html")

    try:
        with smtplib.SMTP(str(settings["host"]), int(settings["port"]), timeout=10) as smtp:
            if settings["use_tls"]:
                smtp.starttls()
            if settings["user"]:
                smtp.login(str(settings["user"]), str(settings["password"]))
            smtp.send_message(msg)
    except (smtplib.SMTPException, OSError) as exc:
        raise MailDeliveryError(f"Failed to send email: {exc}") from exc


def notify_inbox(name: str, email: str, message: str, subject: str | None = None) -> None:
    """Forward a contact message or inquiry to the company inbox.

    Delivery failures are logged and never reach the submitter.
    """
    body = (
        "<h2>New Contact Message</h2>"
        f"<p><strong>Name:</strong> {html.escape(name)}</p>"
        f"<p><strong>Email:</strong> {html.escape(email)}</p>"
        "<p><strong>Message:</strong></p>"
        f"<p>{html.escape(message).replace(chr(10), '<br>')}</p>"
    )
    try:
        send_email(
            get_contact_inbox(),
            subject or f"New Contact Message from {name}",
            body,
            reply_to=email,
        )
    except MailDeliveryError:
        logger.exception("Email notification failed for message from %s", email)
