# Role: Builds the per-turn prompt: recent conversation (oldest first) followed by the newest user message.

from __future__ import annotations

from typing import Dict, List, Optional

_SPEAKERS = {"user": "Customer", "assistant": "Lumi", "system": "System"}


def build_response_prompt(message: str, history: Optional[List[Dict[str, str]]] = None) -> str:
    history_block = "(No previous messages)"
    if history:
        lines = [f'{_SPEAKERS.get(m["role"], m["role"])}: {m["content"]}' for m in history]
        history_block = "\n".join(lines)

    return f"""
Recent conversation:
{history_block}

Newest customer message:
{message.strip()}

Write Lumi's next reply.
""".strip()
