from unittest.mock import MagicMock

import pytest
import requests

from core import emailer, storage
from core.models import EmailTemplate, SubmissionRow
from fetchers import notion


def _response(status=200, body=None):
    r = MagicMock()
    r.status_code = status
    r.ok = 200 <= status < 300
    r.json.return_value = body
    return r


@pytest.fixture
def session():
    return MagicMock()


def test_notion_query_filters_and_sorts(monkeypatch, session):
    session.post.return_value = _response(200, {"results": [{"id": "p1"}]})
    monkeypatch.setattr(notion, "get_session", lambda: session)

    pages = notion.query_database("db-1", status="Available")

    assert pages == [{"id": "p1"}]
    url = session.post.call_args.args[0]
    body = session.post.call_args.kwargs["json"]
    assert url.endswith("/databases/db-1/query")
    assert body["filter"] == {"property": "Status", "select": {"equals": "Available"}}
    assert body["sorts"] == [{"timestamp": "created_time", "direction": "ascending"}]


def test_notion_query_without_status_has_no_filter(monkeypatch, session):
    session.post.return_value = _response(200, {"results": []})
    monkeypatch.setattr(notion, "get_session", lambda: session)

    assert notion.query_database("db-2") == []
    assert "filter" not in session.post.call_args.kwargs["json"]


def test_notion_errors_raise(monkeypatch, session):
    monkeypatch.setattr(notion, "get_session", lambda: session)

    session.post.return_value = _response(401, {"message": "API token is invalid."})
    with pytest.raises(notion.NotionError, match="API token is invalid."):
        notion.query_database("db")

    session.post.side_effect = requests.ConnectionError("down")
    with pytest.raises(notion.NotionError, match="down"):
        notion.query_database("db")


def test_sessions_are_created_once(monkeypatch):
    monkeypatch.setattr(notion, "_session", None)
    first = notion.get_session()
    assert notion.get_session() is first
    assert first.headers["Notion-Version"] == notion.NOTION_VERSION


def test_storage_insert_returns_row(monkeypatch, session):
    session.post.return_value = _response(201, [{"id": 7, "email": "a@b.co"}])
    monkeypatch.setattr(storage, "get_session", lambda: session)
    monkeypatch.setattr(storage, "SUPABASE_URL", "https://proj.supabase.co")

    row = SubmissionRow(submission_type="JOIN_LIST", email="a@b.co")
    assert storage.insert_submission(row) == {"id": 7, "email": "a@b.co"}
    assert session.post.call_args.args[0] == "https://proj.supabase.co/rest/v1/submissions"
    assert session.post.call_args.kwargs["json"] == [row.to_dict()]


def test_storage_errors(monkeypatch, session):
    monkeypatch.setattr(storage, "get_session", lambda: session)
    row = SubmissionRow(submission_type="JOIN_LIST", email="a@b.co")

    monkeypatch.setattr(storage, "SUPABASE_URL", "")
    with pytest.raises(storage.StorageError):
        storage.insert_submission(row)
    session.post.assert_not_called()

    monkeypatch.setattr(storage, "SUPABASE_URL", "https://proj.supabase.co")
    session.post.return_value = _response(400, {"message": "violates check constraint"})
    with pytest.raises(storage.StorageError, match="violates check constraint"):
        storage.insert_submission(row)


def test_email_send(monkeypatch, session):
    monkeypatch.setattr(emailer, "get_session", lambda: session)
    template = EmailTemplate(subject="Hi", html="<p>hi</p>")

    session.post.return_value = _response(200, {"id": "re_1"})
    result = emailer.send_email(template, "ops@example.com")
    assert result.sent is True
    assert result.email_id == "re_1"
    sent = session.post.call_args.kwargs["json"]
    assert sent["to"] == "ops@example.com"
    assert sent["from"] == emailer.EMAIL_FROM

    session.post.return_value = _response(403, {"message": "domain not verified"})
    result = emailer.send_email(template, "ops@example.com")
    assert result.sent is False
    assert result.error == "domain not verified"

    session.post.side_effect = requests.Timeout("slow")
    with pytest.raises(emailer.EmailError):
        emailer.send_email(template, "ops@example.com")


def test_notification_recipient_default(monkeypatch):
    monkeypatch.delenv("NOTIFICATION_EMAIL", raising=False)
    assert emailer.get_notification_recipient() == emailer.DEFAULT_NOTIFICATION_EMAIL
