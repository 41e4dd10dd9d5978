# Role: Deterministic follow-up suggestions for the concierge reply. Detects the topic of the last turn by
# keyword and offers the next natural questions, skipping anything the customer already asked.

from __future__ import annotations

from typing import Iterable, List

_TOPICS = (
    (
        ("book", "booking", "appointment", "schedule", "reserve"),
        [
            "What details do you need to book?",
            "Can I reschedule a visit later?",
            "How soon can someone visit?",
        ],
    ),
    (
        ("price", "pricing", "cost", "quote", "estimate", "fee"),
        [
            "Do you offer free estimates?",
            "Are there any current discounts?",
            "Can you help me book a service?",
        ],
    ),
    (
        ("soon", "today", "available", "availability", "same-day", "visit", "when"),
        [
            "Can I book a same-day visit?",
            "What are your working hours?",
            "Can you help me book a service?",
        ],
    ),
    (
        ("area", "operate", "neighborhood", "city", "location", "where"),
        [
            "Do you serve my neighborhood?",
            "What services do you offer?",
            "How soon can someone visit?",
        ],
    ),
    (
        ("service", "services", "offer", "repair", "cleaning", "plumbing", "electric"),
        [
            "How much does a typical visit cost?",
            "Are your professionals vetted?",
            "Can you help me book a service?",
        ],
    ),
)

_GENERIC = [
    "What services do you offer?",
    "How soon can someone visit?",
    "How can I reach a human?",
]


def build_follow_ups(message: str, reply: str, asked: Iterable[str] = (), limit: int = 3) -> List[str]:
    # 1) Pick the first topic whose keywords appear in the message (then the reply)
    # 2) Drop anything already asked, keep order, top up with generic prompts
    # 3) Truncate to the limit
    asked_set = {a.strip() for a in asked}
    asked_set.add(message.strip())

    candidates: List[str] = []
    for text in (message.lower(), reply.lower()):
        for keywords, prompts in _TOPICS:
            if any(k in text for k in keywords):
                candidates = list(prompts)
                break
        if candidates:
            break

    out: List[str] = []
    for prompt in candidates + _GENERIC:
        if prompt in asked_set or prompt in out:
            continue
        out.append(prompt)

    return out[:limit]
