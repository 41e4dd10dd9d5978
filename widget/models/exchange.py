# Role: Wire contract between the widget and the concierge responder.
# The request carries the new message plus prior history; the reply may omit followUpSuggestions.

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from widget.models.message import HistoryEntry


class ChatRequestPayload(BaseModel):
    message: str
    history: List[HistoryEntry] = Field(default_factory=list)


class ResponderReply(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    reply: str
    follow_up_suggestions: Optional[List[str]] = Field(default=None, alias="followUpSuggestions")
