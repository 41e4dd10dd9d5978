from __future__ import annotations

from types import SimpleNamespace

import pytest

import backend.config as config
from backend.core.concierge import ConciergeResponder
from backend.core.followups import build_follow_ups
from backend.llm.gemini_client import GeminiClient
from backend.prompts.system_prompt import build_system_prompt


class FakeClient:
    def __init__(self, text: str = "Happy to help!"):
        self.text = text
        self.prompts = []
        self.system_instructions = []

    def generate_reply(self, conversation_prompt: str, system_instruction: str | None = None) -> str:
        self.prompts.append(conversation_prompt)
        self.system_instructions.append(system_instruction)
        return self.text


class FakeModels:
    """Stands in for genai.Client().models and records each generate_content call."""

    def __init__(self, text="Hello from Lumi", error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls = []

    def generate_content(self, *, model, contents, config):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


def _gemini(models: FakeModels) -> GeminiClient:
    return GeminiClient(model="test-model", client=SimpleNamespace(models=models))


def test_persona_goes_to_system_instruction_not_the_turn():
    client = FakeClient()
    responder = ConciergeResponder(client=client)

    result = responder.respond(
        "Can you help me book a service?",
        [{"role": "assistant", "content": "Hi there! I'm Lumi."}],
    )

    prompt = client.prompts[0]
    assert client.system_instructions[0] == build_system_prompt()
    assert "You are Lumi" not in prompt
    assert "Lumi: Hi there! I'm Lumi." in prompt
    assert prompt.rstrip().endswith("Write Lumi's next reply.")
    assert "Can you help me book a service?" in prompt
    assert result.reply == "Happy to help!"


def test_gemini_call_carries_persona_in_config():
    models = FakeModels()

    text = _gemini(models).generate_reply("Customer: hi", system_instruction="Be Lumi.")

    call = models.calls[0]
    assert text == "Hello from Lumi"
    assert call["model"] == "test-model"
    assert call["contents"] == "Customer: hi"
    assert call["config"].system_instruction == "Be Lumi."
    assert call["config"].temperature == pytest.approx(0.4)


def test_gemini_defaults_to_concierge_persona():
    models = FakeModels()

    _gemini(models).generate_reply("Customer: hi")

    assert models.calls[0]["config"].system_instruction == build_system_prompt()


@pytest.mark.parametrize(
    "models",
    [FakeModels(error=ConnectionError("quota")), FakeModels(text=None), FakeModels(text="   ")],
)
def test_gemini_failures_raise_runtime_error(models):
    with pytest.raises(RuntimeError):
        _gemini(models).generate_reply("Customer: hi")


def test_gemini_requires_api_key_without_injected_client(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)

    with pytest.raises(RuntimeError):
        GeminiClient()


def test_history_is_limited_to_recent_window(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(config, "HISTORY_WINDOW", 2)
    client = FakeClient()
    responder = ConciergeResponder(client=client)
    history = [{"role": "user", "content": f"message {i}"} for i in range(5)]

    responder.respond("latest", history)

    prompt = client.prompts[0]
    assert "message 2" not in prompt
    assert "Customer: message 3" in prompt
    assert "Customer: message 4" in prompt


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("Lumi: We can come tomorrow.", "We can come tomorrow."),
        ("\n\nAssistant:\nWe can come tomorrow.", "We can come tomorrow."),
        ("Here's my reply: Sure thing!", "Sure thing!"),
        ("We can come tomorrow.\nLumi: signing off", "We can come tomorrow.\nLumi: signing off"),
    ],
)
def test_speaker_tags_are_stripped(raw, expected):
    responder = ConciergeResponder(client=FakeClient(raw))

    assert responder.respond("When can you come?").reply == expected


def test_empty_model_output_raises():
    responder = ConciergeResponder(client=FakeClient("Lumi:"))

    with pytest.raises(RuntimeError):
        responder.respond("Hello")


def test_follow_ups_skip_questions_already_asked():
    responder = ConciergeResponder(client=FakeClient("We serve the whole Bay Area."))

    result = responder.respond(
        "Where do you operate?",
        [{"role": "user", "content": "What services do you offer?"}],
    )

    assert result.follow_up_suggestions == [
        "Do you serve my neighborhood?",
        "How soon can someone visit?",
        "How can I reach a human?",
    ]


def test_follow_ups_by_topic():
    assert build_follow_ups("How much does it cost?", "It depends.") == [
        "Do you offer free estimates?",
        "Are there any current discounts?",
        "Can you help me book a service?",
    ]


def test_follow_ups_fall_back_to_reply_topic_then_generic():
    assert build_follow_ups("Hello", "Would you like to book a visit?")[0] == "What details do you need to book?"
    assert build_follow_ups("Hello", "Hi!") == [
        "What services do you offer?",
        "How soon can someone visit?",
        "How can I reach a human?",
    ]


def test_follow_ups_never_repeat_the_current_message():
    out = build_follow_ups("How soon can someone visit?", "Tomorrow morning works.")

    assert "How soon can someone visit?" not in out
    assert len(out) == 3
