# functions/submit_form.py
import base64
import json
import os
from typing import Any, Dict

from core.logger import get_logger
from core.storage import StorageError
from core.submission import ValidationError, process_submission

from .http import SUBMIT_HEADERS, method_of, respond

logger = get_logger(__name__)

REQUIRED_ENV = ("SUPABASE_URL", "SUPABASE_SERVICE_ROLE_KEY", "RESEND_API_KEY")


def _log_env_presence() -> None:
    # presence only, never values
    for name in REQUIRED_ENV:
        logger.info("ENV CHECK %s: %s", name, bool(os.getenv(name)))
    logger.info(
        "ENV CHECK NOTIFICATION_EMAIL: %s",
        os.getenv("NOTIFICATION_EMAIL") or "(not set, will use default)",
    )


def _parse_body(event: Dict[str, Any]) -> Dict[str, Any]:
    raw = event.get("body")
    if event.get("isBase64Encoded") and isinstance(raw, str):
        raw = base64.b64decode(raw).decode("utf-8")
    payload = json.loads(raw)
    if not isinstance(payload, dict):
        raise ValidationError("Missing required fields")
    return payload


def handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    """Store a contact form submission and email the operator about it."""
    headers = SUBMIT_HEADERS
    method = method_of(event)
    logger.info("submit-form invoked, method=%s", method)

    if method == "OPTIONS":
        return respond(200, headers)

    if method != "POST":
        return respond(405, headers, {"error": "Method not allowed"})

    _log_env_presence()

    try:
        payload = _parse_body(event)
        logger.info(
            "Parsed payload type=%s email=%s watchName=%s",
            payload.get("type"), payload.get("email"), payload.get("watchName") or "(none)",
        )
        result = process_submission(payload)
    except ValidationError as e:
        return respond(400, headers, {"error": str(e)})
    except StorageError as e:
        logger.error("Supabase error: %s", e)
        return respond(500, headers, {"error": "Database error", "details": str(e)})
    except Exception as e:
        logger.exception("Unhandled error in submit-form: %s", e)
        return respond(500, headers, {"error": "Server error", "details": str(e)})

    logger.info(
        "Submission %s stored, emailSent=%s", result.id, result.email_sent
    )
    return respond(200, headers, result.to_response())
