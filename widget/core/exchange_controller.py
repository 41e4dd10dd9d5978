# Role: Turn-taking brain of the widget. Converts one user submission into one completed exchange
# (user message + assistant reply or scripted fallback) against the responder, one exchange at a time.
# Also the presentation boundary: views read messages/suggestions/is_loading and call submit().

from __future__ import annotations

import sys
from typing import Any, Callable, List, Optional, Sequence, Tuple

import widget.config as config
from widget.core.conversation_store import ConversationStore
from widget.core.notifier import Listener
from widget.core.suggestions import QUICK_PROMPTS, SUGGESTION_LIMIT, derive_suggestions
from widget.models.events import ChangeKind, StateChange
from widget.models.exchange import ChatRequestPayload
from widget.models.message import Message
from widget.transport.http_responder import HttpResponder, Responder, ResponderError

FALLBACK_REPLY = "I ran into a hiccup processing that. Could you try again in a moment?"


class ExchangeController:
    def __init__(
        self,
        responder: Optional[Responder] = None,
        store: Optional[ConversationStore] = None,
        catalog: Sequence[str] = QUICK_PROMPTS,
    ) -> None:
        # Key line: responder and store are injectable for tests and alternate views.
        self.store = store or ConversationStore()
        self.responder = responder or HttpResponder()
        self._catalog = tuple(catalog)
        self._follow_ups: List[str] = []
        self._in_flight = False
        self._draft = ""

    # ----------------------------
    # Presentation boundary
    # ----------------------------
    @property
    def messages(self) -> Tuple[Message, ...]:
        return self.store.messages

    @property
    def is_loading(self) -> bool:
        return self._in_flight

    @property
    def follow_up_suggestions(self) -> List[str]:
        """Suggestions supplied by the responder on the last successful exchange."""
        return list(self._follow_ups)

    @property
    def suggestions(self) -> List[str]:
        """Quick replies to display: responder follow-ups, else unused catalog prompts."""
        if self._follow_ups:
            return list(self._follow_ups)
        return derive_suggestions(self.store.messages, self._catalog, SUGGESTION_LIMIT)

    @property
    def draft(self) -> str:
        return self._draft

    def set_draft(self, text: str) -> None:
        self._draft = (text or "")[: config.MAX_INPUT_CHARS]

    @property
    def can_send(self) -> bool:
        return not self._in_flight and bool(self._draft.strip())

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self.store.notifier.subscribe(listener)

    async def select_suggestion(self, prompt: str) -> None:
        # A chip behaves exactly like typing the prompt and pressing Send.
        await self.submit(prompt)

    # ----------------------------
    # Exchange
    # ----------------------------
    def _set_loading(self, value: bool) -> None:
        self._in_flight = value
        self.store.notifier.notify(StateChange(kind=ChangeKind.LOADING_CHANGED, scroll_to_bottom=True))

    @staticmethod
    def _read_result(result: Any) -> Tuple[str, List[str]]:
        # Role: unpack a responder result, rejecting anything off-contract before the store is touched.
        reply = result.reply
        if not isinstance(reply, str) or not reply.strip():
            raise ResponderError("Concierge reply is empty or not text")

        follow_ups = result.follow_up_suggestions
        if follow_ups is None:
            return reply, []
        if not isinstance(follow_ups, (list, tuple)) or not all(isinstance(s, str) for s in follow_ups):
            raise ResponderError("Concierge follow-ups must be a list of strings")

        # Key line: blank chips are dropped; the set is capped at the display limit.
        return reply, [s for s in follow_ups if s.strip()][:SUGGESTION_LIMIT]

    def _replace_follow_ups(self, follow_ups: List[str]) -> None:
        # Key line: wholesale replacement, an empty list is a valid "no follow-ups" state.
        self._follow_ups = list(follow_ups)
        self.store.notifier.notify(StateChange(kind=ChangeKind.SUGGESTIONS_CHANGED))

    async def submit(self, raw_text: str) -> None:
        # 1) Guard: blank text or an exchange already in flight -> no-op
        # 2) Lock + optimistic user append + clear draft, all before the first await
        # 3) Call the responder with the history as it was before this submission
        # 4) Validate the whole result before appending anything
        # 5) Success -> assistant reply + new follow-ups; failure -> scripted fallback, follow-ups untouched
        # 6) Always release the lock
        text = (raw_text or "").strip()
        if not text or self._in_flight:
            return

        self._set_loading(True)
        try:
            prior_history = self.store.history()
            self.store.append("user", text)
            self._draft = ""

            payload = ChatRequestPayload(message=raw_text, history=prior_history)

            if config.DEBUG:
                print("\n--- EXCHANGE ---")
                print("MESSAGE:", raw_text)
                print("HISTORY LEN:", len(prior_history))
                print("----------------\n")

            try:
                result = await self.responder.respond(payload)
                reply, follow_ups = self._read_result(result)
            except Exception as e:
                # Key line: diagnostics go to operators only; the user sees the scripted apology.
                print(f"[exchange] responder failed: {e!r}", file=sys.stderr)
                self.store.append("assistant", FALLBACK_REPLY)
                return

            self.store.append("assistant", reply)
            self._replace_follow_ups(follow_ups)
        finally:
            self._set_loading(False)
