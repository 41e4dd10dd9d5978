# Role: Chat message schema for the widget's conversation store. A Message is frozen once created;
# HistoryEntry is the stripped (role + content) shape sent to the responder.

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["user", "assistant", "system"]


class HistoryEntry(BaseModel):
    role: Role
    content: str


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    role: Role
    content: str = Field(min_length=1)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_history(self) -> HistoryEntry:
        # Key line: ids and timestamps never leave the client.
        return HistoryEntry(role=self.role, content=self.content)
