# core/emailer.py
import os
from typing import Optional

import requests

from .models import EmailResult, EmailTemplate
from .logger import get_logger

logger = get_logger(__name__)

RESEND_API_KEY = os.getenv("RESEND_API_KEY", "").strip()
RESEND_API_URL = os.getenv("RESEND_API_URL", "https://api.resend.com/emails").strip()
EMAIL_FROM = os.getenv(
    "EMAIL_FROM", "Dialed By H <inquiries@mail.dialedbyhenry.com>"
).strip()
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "30"))

DEFAULT_NOTIFICATION_EMAIL = "dialedbyh@gmail.com"

_session: Optional[requests.Session] = None


class EmailError(Exception):
    """The email provider could not be reached."""


def get_notification_recipient() -> str:
    return os.getenv("NOTIFICATION_EMAIL", "").strip() or DEFAULT_NOTIFICATION_EMAIL


def get_session() -> requests.Session:
    global _session
    if _session is None:
        _session = requests.Session()
        _session.headers.update(
            {
                "Authorization": f"Bearer {RESEND_API_KEY}",
                "Content-Type": "application/json",
            }
        )
    return _session


def send_email(template: EmailTemplate, recipient: str) -> EmailResult:
    """
    Send one message through Resend.

    A rejected request comes back as EmailResult(sent=False, error=...);
    only transport failures raise EmailError.
    """
    logger.info("Sending email via Resend from=%s to=%s subject=%s",
                EMAIL_FROM, recipient, template.subject)

    payload = {
        "from": EMAIL_FROM,
        "to": recipient,
        "subject": template.subject,
        "html": template.html,
    }
    try:
        r = get_session().post(RESEND_API_URL, json=payload, timeout=HTTP_TIMEOUT)
    except requests.RequestException as e:
        raise EmailError(str(e)) from e

    try:
        body = r.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    logger.info("Resend response status=%s body=%s", r.status_code, body)

    if not r.ok:
        error = body.get("message") or f"HTTP {r.status_code}"
        logger.error("Resend returned error: %s", error)
        return EmailResult(sent=False, error=str(error))

    email_id = body.get("id")
    logger.info("Email sent successfully, Resend id=%s", email_id)
    return EmailResult(sent=True, email_id=email_id)
