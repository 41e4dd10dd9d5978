# Role: Concierge model adapter. Sends the conversation prompt to Gemini with the Lumi persona carried as the
# model's system instruction (not pasted into the user turn), and turns SDK failures or blank output into
# RuntimeError for the responder.

import os
from typing import Any, Optional

from google import genai
from google.genai import types

from backend.prompts.system_prompt import build_system_prompt


class GeminiClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: float = 0.4,
        max_output_tokens: int = 512,
        system_instruction: Optional[str] = None,
        client: Optional[Any] = None,
    ) -> None:
        # Key line: an injected SDK client skips the API-key requirement (tests, alternate transports).
        self.model_name = model or os.getenv("GEMINI_MODEL", "gemini-1.5-flash")
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self.system_instruction = system_instruction or build_system_prompt()

        if client is not None:
            self.client = client
            return

        api_key = api_key or os.getenv("GEMINI_API_KEY")
        if not api_key:
            raise RuntimeError("Missing GEMINI_API_KEY in environment or .env")
        self.client = genai.Client(api_key=api_key)

    def _config(self, system_instruction: Optional[str]) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            system_instruction=system_instruction or self.system_instruction,
            temperature=self.temperature,
            max_output_tokens=self.max_output_tokens,
        )

    def generate_reply(self, conversation_prompt: str, system_instruction: Optional[str] = None) -> str:
        # 1) Reject an empty conversation turn
        # 2) One call: persona as system instruction, conversation as contents
        # 3) Blank or blocked output counts as a failure
        if not conversation_prompt or not conversation_prompt.strip():
            raise ValueError("Conversation prompt must be non-empty.")

        try:
            resp = self.client.models.generate_content(
                model=self.model_name,
                contents=conversation_prompt,
                config=self._config(system_instruction),
            )
        except Exception as e:
            raise RuntimeError(f"Concierge model call failed: {e}") from e

        text = getattr(resp, "text", None)
        if not text or not text.strip():
            raise RuntimeError("Concierge model returned no text (empty or blocked response).")

        return text.strip()
