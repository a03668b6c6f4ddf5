# core/submission.py
import re
from typing import Any, Dict, Optional

from .models import Category, SubmissionResult, SubmissionRow
from .logger import get_logger
from . import emailer, storage
from .email_templates import build_email

logger = get_logger(__name__)

VALID_TYPES = frozenset(c.value for c in Category)
EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


class ValidationError(Exception):
    """Submission rejected before anything was stored. str(e) is the client message."""


def validate_payload(payload: Dict[str, Any]) -> None:
    submission_type = payload.get("type")
    email = payload.get("email")

    if not submission_type or not email:
        logger.error("Validation failed: missing type or email")
        raise ValidationError("Missing required fields")

    if not isinstance(submission_type, str) or submission_type not in VALID_TYPES:
        logger.error("Validation failed: invalid type %r", submission_type)
        raise ValidationError("Invalid submission type")

    if not isinstance(email, str) or not EMAIL_RE.fullmatch(email):
        logger.error("Validation failed: invalid email %r", email)
        raise ValidationError("Invalid email")


def _clean(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    return value.strip() or None


def normalize_row(payload: Dict[str, Any]) -> SubmissionRow:
    return SubmissionRow(
        submission_type=payload["type"],
        email=payload["email"].lower().strip(),
        full_name=_clean(payload.get("fullName")),
        watch_details=_clean(payload.get("watchDetails")),
        watch_name=_clean(payload.get("watchName")),
        watch_ref=_clean(payload.get("watchRef")),
    )


def notify(row: Dict[str, Any]) -> SubmissionResult:
    """
    Best-effort operator email for a stored row. Never raises; the outcome
    only shows up in the email fields of the returned result.
    """
    result = SubmissionResult(id=row.get("id"))

    try:
        template = build_email(row.get("submission_type", ""), row)
    except Exception as e:
        logger.exception("Email template failed for submission %s: %s", result.id, e)
        return result

    if template is None:
        logger.info("No email template for type %s; skipping notification",
                    row.get("submission_type"))
        return result

    try:
        sent = emailer.send_email(template, emailer.get_notification_recipient())
    except Exception as e:
        logger.exception("Email send failed for submission %s: %s", result.id, e)
        return result

    result.email_sent = sent.sent
    result.email_id = sent.email_id if sent.sent else None
    return result


def process_submission(payload: Dict[str, Any]) -> SubmissionResult:
    """
    Validate, store, then notify.

    Raises ValidationError before any write and StorageError when the insert
    fails; in both cases no email is attempted.
    """
    validate_payload(payload)
    row = normalize_row(payload)

    logger.info("Inserting submission type=%s", row.submission_type)
    stored = storage.insert_submission(row)

    # the stored row is authoritative; fall back to what we sent for any missing column
    data = {**row.to_dict(), **stored}
    return notify(data)
