# Role: Terminal rendering of the BrightSteps support widget. Drives ExchangeController directly, so the
# turn-taking, fallback and suggestion behavior can be exercised against a running backend without a browser.

from __future__ import annotations

import asyncio
from typing import Optional, Sequence

import widget.config
widget.config.load_env()

from widget.core.exchange_controller import ExchangeController
from widget.models.events import ChangeKind, StateChange
from widget.utils.formatting import format_line


def _print_change(change: StateChange) -> None:
    # Role: observer; the terminal "re-renders" by printing each new message as it is appended.
    if change.kind == ChangeKind.MESSAGE_APPENDED and change.message is not None:
        if change.message.role == "user":
            return
        print(f"\n{format_line(change.message)}")
    elif change.kind == ChangeKind.LOADING_CHANGED and widget.config.DEBUG:
        print("(loading changed)")


def _new_controller() -> ExchangeController:
    controller = ExchangeController()
    controller.subscribe(_print_change)
    for message in controller.messages:
        print(format_line(message))
    return controller


def _print_suggestions(controller: ExchangeController) -> None:
    suggestions = controller.suggestions
    if not suggestions:
        return
    print("\nSuggestions:")
    for i, prompt in enumerate(suggestions, start=1):
        print(f"  #{i} {prompt}")


def resolve_chip(text: str, suggestions: Sequence[str]) -> Optional[str]:
    # "#N" picks chip N; anything else (including a bare number like a house number) is a message.
    text = text.strip()
    if not text.startswith("#"):
        return None
    number = text[1:].strip()
    if not number.isdigit():
        return None
    idx = int(number) - 1
    if 0 <= idx < len(suggestions):
        return suggestions[idx]
    return None


async def run() -> None:
    print("BrightSteps Support (CLI)")
    print("Commands: /new (new conversation), /exit. Type #N (e.g. #2) to pick suggestion N.")
    print("-" * 50)

    controller = _new_controller()

    while True:
        _print_suggestions(controller)
        try:
            raw = await asyncio.to_thread(input, "\nYou: ")
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        cmd = raw.strip().lower()
        if cmd in {"/exit", "exit", "quit", "/quit"}:
            print("Bye!")
            return

        if cmd in {"/new", "new"}:
            print()
            controller = _new_controller()
            continue

        chip = resolve_chip(raw, controller.suggestions)
        if chip is not None:
            print(f"You: {chip}")
            await controller.select_suggestion(chip)
            continue

        controller.set_draft(raw)
        await controller.submit(controller.draft)


def main() -> None:
    asyncio.run(run())


if __name__ == "__main__":
    main()
