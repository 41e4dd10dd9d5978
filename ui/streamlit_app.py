# Role: Streamlit page for the BrightSteps support widget.
# - ExchangeController (widget.core) is authoritative for messages, suggestions and the loading flag.
# - This page only renders that state and forwards input/chip clicks to controller.submit().

from __future__ import annotations

import asyncio
from typing import Callable

import streamlit as st
import streamlit.components.v1 as components

import widget.config as config
from widget.core.exchange_controller import ExchangeController
from widget.models.events import ChangeKind, StateChange
from widget.models.message import Message
from widget.utils.formatting import format_timestamp, speaker_label

config.load_env()


# ----------------------------
# Session helpers
# ----------------------------
def ensure_session() -> ExchangeController:
    if "controller" not in st.session_state:
        controller = ExchangeController()
        st.session_state["controller"] = controller
        st.session_state["scroll_pending"] = False

        def _remember_scroll(change: StateChange) -> None:
            if change.scroll_to_bottom:
                st.session_state["scroll_pending"] = True

        controller.subscribe(_remember_scroll)
    return st.session_state["controller"]


def run_submit(controller: ExchangeController, text: str, chat_area) -> None:
    # 1) Subscribe a live listener so the user's message shows before the reply arrives
    # 2) Run the async exchange to completion under a typing indicator
    # 3) Unsubscribe and rerun so the page renders from the controller again
    unsubscribe = controller.subscribe(_live_renderer(chat_area))
    try:
        with st.spinner("Lumi is typing…"):
            asyncio.run(controller.submit(text))
    finally:
        unsubscribe()
    st.rerun()


def _live_renderer(chat_area) -> Callable[[StateChange], None]:
    def _render(change: StateChange) -> None:
        if change.kind == ChangeKind.MESSAGE_APPENDED and change.message is not None:
            with chat_area:
                render_bubble(change.message)

    return _render


# ----------------------------
# UI polish
# ----------------------------
def inject_css() -> None:
    st.markdown(
        """
<style>
.block-container { max-width: 1100px; padding-top: 2rem; padding-bottom: 2rem; }

.bs-status {
  display: inline-block;
  width: 10px; height: 10px;
  border-radius: 50%;
  background: #22c55e;
  margin-right: 8px;
}

.bs-meta {
  font-size: 0.80rem;
  opacity: 0.65;
  margin-bottom: 2px;
}

.bs-card {
  border: 1px solid rgba(49, 51, 63, 0.14);
  border-radius: 16px;
  padding: 14px;
  margin-bottom: 12px;
}

.stButton>button {
  border-radius: 999px !important;
  padding: 0.35rem 0.85rem !important;
  font-weight: 600 !important;
}
</style>
""",
        unsafe_allow_html=True,
    )


def scroll_to_bottom() -> None:
    # Key line: the chat lives in the parent document; the component iframe scrolls it.
    components.html(
        """
<script>
const doc = window.parent.document;
const main = doc.querySelector('section.main') || doc.scrollingElement;
if (main) { main.scrollTo({ top: main.scrollHeight, behavior: 'smooth' }); }
</script>
""",
        height=0,
    )


# ----------------------------
# Sidebar: static BrightSteps info
# ----------------------------
def render_sidebar() -> None:
    st.sidebar.markdown(
        """
<div class="bs-card">
<h4>About BrightSteps</h4>
<p>BrightSteps connects homeowners with trusted local professionals for home upkeep, repairs,
and lifestyle services. We vet every specialist so you can book with confidence.</p>
<ul>
<li>Same-day and scheduled visits</li>
<li>Eco-conscious practices</li>
<li>Dedicated neighborhood teams</li>
</ul>
</div>
<div class="bs-card">
<h4>Need a human?</h4>
<p>Email hello@brightsteps.co or call (415) 555-9024 weekdays 8am-6pm.</p>
</div>
""",
        unsafe_allow_html=True,
    )


# ----------------------------
# Chat
# ----------------------------
def render_bubble(message: Message) -> None:
    with st.chat_message(message.role):
        st.markdown(
            f'<div class="bs-meta">{speaker_label(message)} · {format_timestamp(message.timestamp)}</div>',
            unsafe_allow_html=True,
        )
        st.write(message.content)


def render_suggestions(controller: ExchangeController, chat_area) -> None:
    suggestions = controller.suggestions
    if not suggestions:
        return

    cols = st.columns(len(suggestions))
    for i, (col, prompt) in enumerate(zip(cols, suggestions)):
        with col:
            if st.button(prompt, key=f"suggestion-{i}-{prompt}"):
                run_submit(controller, prompt, chat_area)


# ----------------------------
# Main
# ----------------------------
def main() -> None:
    st.set_page_config(page_title="BrightSteps Support", page_icon="💬", layout="wide")
    inject_css()

    st.markdown('<h1><span class="bs-status"></span>BrightSteps Support</h1>', unsafe_allow_html=True)
    st.caption("Real people. Real help. Powered by a friendly AI concierge.")

    controller = ensure_session()
    render_sidebar()

    chat_area = st.container()
    with chat_area:
        for message in controller.messages:
            render_bubble(message)

    render_suggestions(controller, chat_area)

    # Key line: submit() finishes inside one script run, so widgets never render mid-exchange;
    # the spinner in run_submit() is the loading indicator.
    user_input = st.chat_input(
        "Ask about services, pricing, availability, or anything else.",
        max_chars=config.MAX_INPUT_CHARS,
    )

    if st.session_state.get("scroll_pending"):
        st.session_state["scroll_pending"] = False
        scroll_to_bottom()

    if user_input:
        controller.set_draft(user_input)
        run_submit(controller, controller.draft, chat_area)


if __name__ == "__main__":
    main()
