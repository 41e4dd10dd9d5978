# Role: Responder collaborator over HTTP. POSTs {message, history} to the concierge backend and returns a
# validated ResponderReply. Every failure (transport, status, body shape) surfaces as ResponderError.

from __future__ import annotations

from typing import Optional, Protocol

import httpx
from pydantic import ValidationError

import widget.config as config
from widget.models.exchange import ChatRequestPayload, ResponderReply


class ResponderError(Exception):
    """Raised when the concierge backend cannot produce a usable reply."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class Responder(Protocol):
    async def respond(self, payload: ChatRequestPayload) -> ResponderReply: ...


class HttpResponder:
    CHAT_PATH = "/api/chat"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        # Key line: defaults are read at construction time so load_env() can run first.
        self.base_url = (base_url or config.CONCIERGE_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT_SECONDS
        self._transport = transport

    async def respond(self, payload: ChatRequestPayload) -> ResponderReply:
        # 1) POST the payload as JSON
        # 2) Reject non-2xx statuses
        # 3) Parse and validate the body (reply must be a string)
        url = f"{self.base_url}{self.CHAT_PATH}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(url, json=payload.model_dump(mode="json"))
        except httpx.HTTPError as e:
            raise ResponderError(f"Concierge request failed: {e!r}") from e

        if not resp.is_success:
            raise ResponderError(f"Concierge returned HTTP {resp.status_code}", status_code=resp.status_code)

        try:
            body = resp.json()
        except ValueError as e:
            raise ResponderError("Concierge returned a non-JSON body", status_code=resp.status_code) from e

        try:
            reply = ResponderReply.model_validate(body)
        except ValidationError as e:
            raise ResponderError(f"Malformed concierge reply: {e}", status_code=resp.status_code) from e

        if config.DEBUG:
            print("\n--- CONCIERGE RESPONSE ---")
            print("URL:", url)
            print("REPLY:", reply.reply)
            print("FOLLOW-UPS:", reply.follow_up_suggestions)
            print("--------------------------\n")

        return reply
