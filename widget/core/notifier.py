# Role: Observer registry for the widget. Views subscribe a callback and get a StateChange on every mutation.
# A failing listener is reported and skipped; it never breaks the store or the exchange in progress.

from __future__ import annotations

import sys
from typing import Callable, List

import widget.config as config
from widget.models.events import StateChange

Listener = Callable[[StateChange], None]


class Notifier:
    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def notify(self, change: StateChange) -> None:
        # Iterate over a copy: a listener may unsubscribe itself while handling the change.
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception as e:
                print(f"[notifier] listener failed on {change.kind.value}: {e!r}", file=sys.stderr)
                if config.DEBUG:
                    print("LISTENER:", listener)

    def __len__(self) -> int:
        return len(self._listeners)
