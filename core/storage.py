# core/storage.py
import os
from typing import Any, Dict, Optional

import requests

from .models import SubmissionRow
from .logger import get_logger

logger = get_logger(__name__)

SUPABASE_URL = os.getenv("SUPABASE_URL", "").strip().rstrip("/")
SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY", "").strip()
SUBMISSIONS_TABLE = os.getenv("SUBMISSIONS_TABLE", "submissions").strip()
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "30"))

_session: Optional[requests.Session] = None


class StorageError(Exception):
    """Insert into the submissions table failed."""


def get_session() -> requests.Session:
    global _session
    if _session is None:
        _session = requests.Session()
        _session.headers.update(
            {
                "apikey": SUPABASE_SERVICE_ROLE_KEY,
                "Authorization": f"Bearer {SUPABASE_SERVICE_ROLE_KEY}",
                "Content-Type": "application/json",
                # PostgREST only echoes the inserted row when asked to
                "Prefer": "return=representation",
            }
        )
    return _session


def _error_message(r: requests.Response) -> str:
    try:
        body = r.json()
    except ValueError:
        return f"HTTP {r.status_code}"
    if isinstance(body, dict):
        return str(body.get("message") or body.get("error") or f"HTTP {r.status_code}")
    return f"HTTP {r.status_code}"


def insert_submission(row: SubmissionRow) -> Dict[str, Any]:
    """
    Insert one row and return it as stored, including the generated id.
    """
    if not SUPABASE_URL:
        raise StorageError("SUPABASE_URL is not configured")

    url = f"{SUPABASE_URL}/rest/v1/{SUBMISSIONS_TABLE}"
    try:
        r = get_session().post(url, json=[row.to_dict()], timeout=HTTP_TIMEOUT)
    except requests.RequestException as e:
        raise StorageError(str(e)) from e

    if not r.ok:
        raise StorageError(_error_message(r))

    try:
        rows = r.json()
    except ValueError as e:
        raise StorageError(f"Unexpected insert response: {e}") from e

    if not isinstance(rows, list) or len(rows) != 1 or not isinstance(rows[0], dict):
        raise StorageError("Insert did not return exactly one row")

    stored = rows[0]
    logger.info("Stored submission id=%s", stored.get("id"))
    return stored
