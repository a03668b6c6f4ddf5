import datetime
from pathlib import Path
from typing import Any, Dict, Optional

import pytz
from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.models import Category, EmailTemplate

# Resolve template directory relative to this file
TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html"]),
)


def now_utc_str() -> str:
    return datetime.datetime.now(tz=pytz.UTC).strftime("%Y-%m-%d %H:%M UTC")


def _inquiry(heading: str, subject: str, row: Dict[str, Any], received_at: str) -> EmailTemplate:
    html = env.get_template("inquiry.html").render(
        heading=heading, received_at=received_at, **_context(row)
    )
    return EmailTemplate(subject=subject, html=html)


def _context(row: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "full_name": row.get("full_name"),
        "email": row.get("email"),
        "watch_name": row.get("watch_name"),
        "watch_ref": row.get("watch_ref"),
        "watch_details": row.get("watch_details"),
    }


def build_email(
    submission_type: str, row: Dict[str, Any], received_at: str | None = None
) -> Optional[EmailTemplate]:
    """
    Operator notification for a stored submission row, or None when the
    type has no template.
    """
    try:
        category = Category(submission_type)
    except ValueError:
        return None

    received_at = received_at or now_utc_str()
    watch_name = row.get("watch_name")

    match category:
        case Category.JOIN_LIST:
            html = env.get_template("join_list.html").render(
                received_at=received_at, **_context(row)
            )
            return EmailTemplate(subject="New Private List Signup", html=html)
        case Category.BUY:
            return _inquiry(
                "New Sourcing Request",
                f"Sourcing Request: {watch_name or 'New Request'}",
                row, received_at,
            )
        case Category.SELL:
            return _inquiry(
                "New Sell Request",
                f"Sell Request: {watch_name or 'New Request'}",
                row, received_at,
            )
        case Category.TRADE:
            return _inquiry(
                "New Trade Request",
                f"Trade Request: {watch_name or 'New Request'}",
                row, received_at,
            )
        case Category.WATCH_DETAIL:
            return _inquiry(
                "New Watch Inquiry",
                f"Watch Inquiry: {watch_name or 'Unknown'}",
                row, received_at,
            )
