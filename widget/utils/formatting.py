# Role: Small display helpers shared by the Streamlit page and the CLI.

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Optional

from widget.models.message import Message

ASSISTANT_NAME = "Lumi"


def format_timestamp(ts: datetime, tz: Optional[tzinfo] = None) -> str:
    # Key line: stored timestamps are UTC; show them as local HH:MM unless a zone is given.
    return ts.astimezone(tz).strftime("%H:%M")


def speaker_label(message: Message) -> str:
    return ASSISTANT_NAME if message.role == "assistant" else "You"


def format_line(message: Message, tz: Optional[tzinfo] = None) -> str:
    return f"[{format_timestamp(message.timestamp, tz)}] {speaker_label(message)}: {message.content}"
