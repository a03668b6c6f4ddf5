# fetchers/notion.py
import os
from typing import Any, Dict, List, Optional

import requests

from core.logger import get_logger

logger = get_logger(__name__)

NOTION_API_KEY = os.getenv("NOTION_API_KEY", "").strip()
NOTION_VERSION = os.getenv("NOTION_VERSION", "2022-06-28").strip()
NOTION_BASE_URL = os.getenv("NOTION_BASE_URL", "https://api.notion.com/v1").rstrip("/")
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "30"))

_session: Optional[requests.Session] = None


class NotionError(Exception):
    """Raised when the Notion query cannot be completed."""


def get_session() -> requests.Session:
    global _session
    if _session is None:
        _session = requests.Session()
        _session.headers.update(
            {
                "Authorization": f"Bearer {NOTION_API_KEY}",
                "Notion-Version": NOTION_VERSION,
                "Content-Type": "application/json",
            }
        )
    return _session


def _error_message(r: requests.Response) -> str:
    try:
        body = r.json()
    except ValueError:
        return f"HTTP {r.status_code}"
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"HTTP {r.status_code}"


def query_database(
    database_id: str, status: Optional[str] = None
) -> List[Dict[str, Any]]:
    """
    Single query of a database, oldest pages first, optionally limited to
    one Status option. Only the first page of results is read.
    """
    payload: Dict[str, Any] = {
        "sorts": [{"timestamp": "created_time", "direction": "ascending"}],
    }
    if status:
        payload["filter"] = {"property": "Status", "select": {"equals": status}}

    url = f"{NOTION_BASE_URL}/databases/{database_id}/query"
    logger.info("Querying Notion database %s (status=%s)", database_id, status or "*")

    try:
        r = get_session().post(url, json=payload, timeout=HTTP_TIMEOUT)
    except requests.RequestException as e:
        raise NotionError(str(e)) from e

    if not r.ok:
        raise NotionError(_error_message(r))

    try:
        results = r.json().get("results") or []
    except (ValueError, AttributeError) as e:
        raise NotionError(f"Unexpected Notion response: {e}") from e

    logger.info("Notion returned %d pages for %s", len(results), database_id)
    return results
