# Role: State-change notifications delivered to view listeners (re-render + scroll requests).

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from widget.models.message import Message


class ChangeKind(str, Enum):
    MESSAGE_APPENDED = "message_appended"
    LOADING_CHANGED = "loading_changed"
    SUGGESTIONS_CHANGED = "suggestions_changed"


@dataclass(frozen=True)
class StateChange:
    kind: ChangeKind
    scroll_to_bottom: bool = False
    message: Optional[Message] = None
