# Role: Append-only message sequence for one widget session. Seeds the concierge greeting,
# assigns ids/timestamps on append, and notifies listeners (re-render + scroll-to-bottom).

from __future__ import annotations

import itertools
import uuid
from typing import List, Optional, Tuple

from widget.core.notifier import Notifier
from widget.models.events import ChangeKind, StateChange
from widget.models.message import HistoryEntry, Message, Role

GREETING = "Hi there! I’m Lumi, the virtual concierge at BrightSteps Local Services. How can I assist you today?"
GREETING_ID = "welcome"


class ConversationStore:
    def __init__(self, notifier: Optional[Notifier] = None, greeting: str = GREETING) -> None:
        self.notifier = notifier or Notifier()
        self._seq = itertools.count(1)
        # Key line: the session never starts empty; the greeting is seeded without a notification.
        self._messages: List[Message] = [Message(id=GREETING_ID, role="assistant", content=greeting)]

    def _next_id(self, role: Role) -> str:
        # Counter guarantees uniqueness; the uuid suffix keeps ids distinct across store instances.
        return f"{role}-{next(self._seq)}-{uuid.uuid4().hex[:8]}"

    def append(self, role: Role, content: str) -> Message:
        # 1) Build the message (pydantic rejects empty content)
        # 2) Append at the end
        # 3) Notify views and request a scroll to the newest entry
        message = Message(id=self._next_id(role), role=role, content=content)
        self._messages.append(message)
        self.notifier.notify(
            StateChange(kind=ChangeKind.MESSAGE_APPENDED, scroll_to_bottom=True, message=message)
        )
        return message

    @property
    def messages(self) -> Tuple[Message, ...]:
        return tuple(self._messages)

    def history(self) -> List[HistoryEntry]:
        return [m.to_history() for m in self._messages]

    def __len__(self) -> int:
        return len(self._messages)
