from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from backend.api.chat import ERROR_REPLY
from backend.api.deps import get_responder
from backend.core.concierge import ConciergeReply
from backend.main import app


class FakeConcierge:
    def __init__(self, reply: ConciergeReply | None = None, error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls = []

    def respond(self, message, history=None):
        self.calls.append((message, history))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_concierge():
    fake = FakeConcierge(ConciergeReply(reply="Sure!", follow_up_suggestions=["A", "B"]))
    app.dependency_overrides[get_responder] = lambda: fake
    yield fake
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)


def test_chat_returns_reply_and_camel_case_follow_ups(client, fake_concierge):
    r = client.post(
        "/api/chat",
        json={
            "message": "Can you help me book a service?",
            "history": [{"role": "assistant", "content": "Hi there!"}],
        },
    )

    assert r.status_code == 200
    assert r.json() == {"reply": "Sure!", "followUpSuggestions": ["A", "B"]}
    assert fake_concierge.calls == [
        ("Can you help me book a service?", [{"role": "assistant", "content": "Hi there!"}])
    ]


def test_history_defaults_to_empty(client, fake_concierge):
    r = client.post("/api/chat", json={"message": "Hello"})

    assert r.status_code == 200
    assert fake_concierge.calls == [("Hello", [])]


def test_responder_failure_returns_500_with_safe_reply(client, fake_concierge):
    fake_concierge.error = RuntimeError("Concierge model call failed: quota")

    r = client.post("/api/chat", json={"message": "Hello", "history": []})

    assert r.status_code == 500
    assert r.json() == {"reply": ERROR_REPLY}
    assert "quota" not in r.text


def test_invalid_payload_is_rejected(client, fake_concierge):
    r = client.post("/api/chat", json={"message": "", "history": []})
    assert r.status_code == 422

    r = client.post("/api/chat", json={"message": "Hi", "history": [{"role": "robot", "content": "x"}]})
    assert r.status_code == 422
    assert fake_concierge.calls == []


def test_health_and_root(client):
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/").json()["chat"] == "/api/chat"
