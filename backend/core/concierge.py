# Role: Backend responder. Maps (message, history) -> ConciergeReply by prompting the model with the Lumi
# persona plus recent history, cleaning the output, and attaching deterministic follow-up suggestions.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import backend.config as config
from backend.core.followups import build_follow_ups
from backend.llm.gemini_client import GeminiClient
from backend.prompts.response_prompt import build_response_prompt
from backend.prompts.system_prompt import build_system_prompt


@dataclass(frozen=True)
class ConciergeReply:
    reply: str
    follow_up_suggestions: List[str] = field(default_factory=list)


class ConciergeResponder:
    _PREAMBLE_PREFIXES = ("lumi:", "assistant:", "here's my reply", "here is my reply")

    def __init__(self, client: Optional[GeminiClient] = None) -> None:
        # Key line: lazy-init so the app boots (and /health works) without GEMINI_API_KEY.
        self._client = client

    def _get_client(self) -> GeminiClient:
        if self._client is None:
            self._client = GeminiClient()
        return self._client

    def _clean_output(self, text: str) -> str:
        # Role: drop a leading speaker tag or meta preamble without touching the answer itself.
        lines = (text or "").strip().splitlines()
        while lines:
            low = lines[0].strip().lower()
            if not low:
                lines.pop(0)
                continue
            tag = next((p for p in self._PREAMBLE_PREFIXES if low.startswith(p)), None)
            if tag is None:
                break
            rest = lines[0].strip()[len(tag):].lstrip(" :,-").strip()
            if rest:
                lines[0] = rest
                break
            lines.pop(0)
        return "\n".join(lines).strip()

    def respond(self, message: str, history: Optional[List[Dict[str, str]]] = None) -> ConciergeReply:
        # 1) Keep only the most recent history window
        # 2) Prompt the model: persona as system instruction, conversation as the turn
        # 3) Clean output; an empty answer is an error, not a reply
        # 4) Attach follow-ups that do not repeat earlier customer messages
        history = history or []
        recent = history[-config.HISTORY_WINDOW:] if config.HISTORY_WINDOW else []

        raw = self._get_client().generate_reply(
            build_response_prompt(message, recent),
            system_instruction=build_system_prompt(),
        )
        reply = self._clean_output(raw)
        if not reply:
            raise RuntimeError("Concierge produced an empty reply.")

        asked = [m["content"] for m in history if m.get("role") == "user"]
        follow_ups = build_follow_ups(message, reply, asked=asked)

        if config.DEBUG:
            print("\n--- CONCIERGE ---")
            print("MESSAGE:", message)
            print("HISTORY (sent):", recent)
            print("RAW:", (raw or "")[:600])
            print("REPLY:", reply)
            print("FOLLOW-UPS:", follow_ups)
            print("-----------------\n")

        return ConciergeReply(reply=reply, follow_up_suggestions=follow_ups)
