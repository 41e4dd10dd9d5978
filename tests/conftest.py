"""Pytest configuration and shared fixtures for the widget and the concierge backend."""
from __future__ import annotations

import asyncio
from typing import List, Optional

import pytest

from widget.models.exchange import ChatRequestPayload, ResponderReply


class StubResponder:
    """Responder double: returns a fixed reply (or raises) and records every payload."""

    def __init__(self, reply: Optional[ResponderReply] = None, error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.calls: List[ChatRequestPayload] = []

    async def respond(self, payload: ChatRequestPayload) -> ResponderReply:
        self.calls.append(payload)
        if self.error is not None:
            raise self.error
        return self.reply


class GatedResponder(StubResponder):
    """Holds every call until `release` is set, so tests can observe the in-flight state."""

    def __init__(self, reply: Optional[ResponderReply] = None, error: Optional[Exception] = None):
        super().__init__(reply=reply, error=error)
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def respond(self, payload: ChatRequestPayload) -> ResponderReply:
        self.calls.append(payload)
        self.started.set()
        await self.release.wait()
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def stub_responder_factory():
    return StubResponder


@pytest.fixture
def gated_responder_factory():
    return GatedResponder


@pytest.fixture(autouse=True)
def quiet_debug(monkeypatch: pytest.MonkeyPatch):
    """Keep DEBUG traces off regardless of the developer's .env."""
    import backend.config
    import widget.config

    monkeypatch.setattr(widget.config, "DEBUG", False)
    monkeypatch.setattr(backend.config, "DEBUG", False)
    yield
