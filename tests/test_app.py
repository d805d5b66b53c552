from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

import app as service
from moviebot.catalog import DEFAULT_FAQS, StaticCatalog
from moviebot.schemas import FAQ


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(service, "_provider", StaticCatalog())
    monkeypatch.setattr(service, "_catalog", None)
    monkeypatch.setattr(service, "is_configured", lambda: False)
    return TestClient(service.app)


def test_chat_answers_from_catalog(client):
    resp = client.post("/chat", json={"session_id": "visitor-1", "message": "What are the ticket prices?"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["session_id"] == "visitor-1"
    assert body["faq_id"] == "default-4"
    assert body["match_score"] == 1.0
    assert body["emotion"] == "confused"
    assert body["emoji"] == "🤔"
    assert body["base_answer"] == DEFAULT_FAQS[3].answer
    assert DEFAULT_FAQS[3].answer in body["reply"]


def test_chat_without_match_suggests_topics(client):
    resp = client.post("/chat", json={"session_id": "visitor-1", "message": "asdkjasdkj random gibberish"})
    body = resp.json()
    assert body["faq_id"] is None
    assert body["base_answer"] is None
    assert body["emotion"] == "neutral"
    assert "• What is the refund policy?" in body["reply"]


def test_blank_message_is_rejected(client):
    resp = client.post("/chat", json={"session_id": "visitor-1", "message": "   "})
    assert resp.status_code == 400


def test_missing_fields_are_rejected(client):
    assert client.post("/chat", json={"message": "hi"}).status_code == 422


def test_turn_is_logged_when_mongo_configured(client, monkeypatch):
    log_turn = MagicMock()
    monkeypatch.setattr(service, "is_configured", lambda: True)
    monkeypatch.setattr(service, "log_turn", log_turn)

    client.post("/chat", json={"session_id": "visitor-1", "message": "refund please"})

    log_turn.assert_called_once()
    session_id, message, composed = log_turn.call_args.args
    assert session_id == "visitor-1"
    assert message == "refund please"
    assert composed.faq_id == "default-1"


def test_health(client):
    body = client.get("/health").json()
    assert body == {"status": "ok", "catalog_size": 7, "mongo_configured": False}


def test_faqs_lists_catalog(client):
    body = client.get("/faqs").json()
    assert [f["id"] for f in body] == [f.id for f in DEFAULT_FAQS]


def test_reload_picks_up_new_catalog(client, monkeypatch):
    assert len(client.get("/faqs").json()) == 7
    monkeypatch.setattr(service, "_provider", StaticCatalog([FAQ(id="only", question="Parking?")]))
    assert client.post("/admin/faqs/reload").json() == {"status": "ok", "catalog_size": 1}
    assert [f["id"] for f in client.get("/faqs").json()] == ["only"]


def test_admin_logs_empty_without_mongo(client):
    assert client.get("/admin/logs").json() == {"logs": []}


@pytest.mark.parametrize("limit", [0, -1, 501])
def test_admin_logs_limit_is_bounded(client, limit):
    assert client.get("/admin/logs", params={"limit": limit}).status_code == 422


def test_admin_logs_passes_limit_through(client, monkeypatch):
    recent = MagicMock(return_value=[{"message_text": "hi"}])
    monkeypatch.setattr(service, "is_configured", lambda: True)
    monkeypatch.setattr(service, "recent_messages", recent)
    assert client.get("/admin/logs", params={"limit": 20}).json() == {"logs": [{"message_text": "hi"}]}
    recent.assert_called_once_with(20)
