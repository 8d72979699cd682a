# tests/test_gemini_client.py

import asyncio
from types import SimpleNamespace

import pytest

import chatroom.llm.gemini_client as gemini_client
from chatroom.llm.gemini_client import CompletionError, GeminiClient, MissingApiKeyError


class _FakeModels:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    async def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.result


def _install(monkeypatch, models):
    def factory(api_key):
        return SimpleNamespace(api_key=api_key, aio=SimpleNamespace(models=models))

    monkeypatch.setattr(gemini_client.genai, "Client", factory)


def test_missing_key_raises(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    with pytest.raises(MissingApiKeyError, match="Missing GEMINI_API_KEY"):
        GeminiClient()


def test_defaults_from_env(monkeypatch):
    _install(monkeypatch, _FakeModels())
    monkeypatch.setenv("GEMINI_API_KEY", "k")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-test")
    monkeypatch.setenv("GEMINI_TEMPERATURE", "0.5")
    monkeypatch.setenv("GEMINI_MAX_OUTPUT_TOKENS", "not-a-number")

    client = GeminiClient()
    assert client.model_name == "gemini-test"
    assert client.temperature == 0.5
    assert client.max_output_tokens == 650


def test_single_user_call_with_generation_params(monkeypatch):
    models = _FakeModels(result=SimpleNamespace(text='  {"messages": []}  '))
    _install(monkeypatch, models)

    client = GeminiClient(api_key="k", model="m", temperature=0.2, max_output_tokens=100)
    text = asyncio.run(client.generate_text("hello"))

    assert text == '{"messages": []}'
    assert len(models.calls) == 1
    call = models.calls[0]
    assert call["model"] == "m"
    assert call["contents"][0].role == "user"
    assert call["contents"][0].parts[0].text == "hello"
    assert call["config"].temperature == 0.2
    assert call["config"].max_output_tokens == 100


def test_empty_response_text_is_empty_string(monkeypatch):
    _install(monkeypatch, _FakeModels(result=SimpleNamespace(text=None)))
    client = GeminiClient(api_key="k")
    assert asyncio.run(client.generate_text("hello")) == ""


def test_sdk_errors_are_wrapped(monkeypatch):
    _install(monkeypatch, _FakeModels(error=ConnectionError("network down")))
    client = GeminiClient(api_key="k")

    with pytest.raises(CompletionError, match="network down") as info:
        asyncio.run(client.generate_text("hello"))
    assert isinstance(info.value.__cause__, ConnectionError)


def test_blank_prompt_rejected(monkeypatch):
    _install(monkeypatch, _FakeModels())
    client = GeminiClient(api_key="k")
    with pytest.raises(ValueError):
        asyncio.run(client.generate_text("   "))


def test_defaults_match_settings(monkeypatch):
    from chatroom.config import get_settings
    from chatroom.core.chat_service import ChatService

    _install(monkeypatch, _FakeModels())
    monkeypatch.setenv("GEMINI_API_KEY", "k")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-settings")
    monkeypatch.setenv("GEMINI_TEMPERATURE", "0.3")
    monkeypatch.setenv("GEMINI_MAX_OUTPUT_TOKENS", "321")

    settings = get_settings()
    client = ChatService().ensure_ready()
    assert (client.model_name, client.temperature, client.max_output_tokens) == (
        settings.gemini_model,
        settings.temperature,
        settings.max_output_tokens,
    ) == ("gemini-settings", 0.3, 321)
