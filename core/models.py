# core/models.py
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class Category(str, Enum):
    JOIN_LIST = "JOIN_LIST"
    BUY = "BUY"
    SELL = "SELL"
    TRADE = "TRADE"
    WATCH_DETAIL = "WATCH_DETAIL"


@dataclass
class DisplayItem:
    """
    Public listing entry built from one Notion page.
    Field names are the JSON keys the site reads, hence camelCase on caseSize.
    """
    id: str
    brand: str = ""
    name: str = ""
    ref: str = ""
    price: str = "Inquire"
    details: str = ""
    image: str = ""
    images: List[str] = field(default_factory=list)
    year: str = ""
    condition: str = ""
    material: str = ""
    dial: str = ""
    caseSize: str = ""
    contents: str = "Watch Only"
    description: str = ""
    model: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SubmissionRow:
    """Row written to the submissions table. Never updated from here."""
    submission_type: str
    email: str
    full_name: Optional[str] = None
    watch_details: Optional[str] = None
    watch_name: Optional[str] = None
    watch_ref: Optional[str] = None
    status: str = "new"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class EmailTemplate:
    subject: str
    html: str


@dataclass
class EmailResult:
    sent: bool
    email_id: Optional[str] = None
    error: Optional[str] = None


@dataclass
class SubmissionResult:
    """
    Outcome of persist-then-notify. `id` is the stored row id; the email
    fields describe the best-effort notification and never affect success.
    """
    id: Any
    email_sent: bool = False
    email_id: Optional[str] = None

    def to_response(self) -> Dict[str, Any]:
        return {
            "success": True,
            "id": self.id,
            "emailSent": self.email_sent,
            "emailId": self.email_id,
        }
