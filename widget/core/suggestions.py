# Role: Quick-reply fallback. When the responder supplied no follow-ups, offer catalog prompts
# the user has not already sent. Display-only; never part of the request payload.

from __future__ import annotations

from typing import Iterable, List, Sequence

from widget.models.message import Message

QUICK_PROMPTS: tuple[str, ...] = (
    "Can you help me book a service?",
    "What services do you offer?",
    "How soon can someone visit?",
    "Where do you operate?",
)

SUGGESTION_LIMIT = 3


def derive_suggestions(
    messages: Iterable[Message],
    catalog: Sequence[str] = QUICK_PROMPTS,
    limit: int = SUGGESTION_LIMIT,
) -> List[str]:
    # 1) Collect every text already in history (exact match, no normalization)
    # 2) Keep catalog order, drop used prompts
    # 3) Truncate to the limit
    used = {m.content for m in messages}
    unused = [prompt for prompt in catalog if prompt not in used]
    return unused[:limit]
