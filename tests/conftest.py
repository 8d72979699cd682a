# tests/conftest.py

import json

import pytest
from fastapi.testclient import TestClient

from chatroom.api.deps import get_chat_service
from chatroom.core.chat_service import ChatService
from chatroom.main import app


class FakeGeminiClient:
    """Stands in for GeminiClient: returns canned text (or raises) and records prompts."""

    def __init__(self, text="", error=None):
        self.text = text
        self.error = error
        self.prompts = []

    async def generate_text(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


def full_reply(**overrides):
    data = {
        "messages": [
            {"from": "Aiden", "text": "Seriously? Let's sneak out."},
            {"from": "Lucas", "text": "Curfew is in ten minutes."},
            {"from": "Maya", "text": "Maybe just the library?"},
            {"from": "Theo", "text": "I know a passage behind the tapestry. Coming?"},
        ],
        "summary_append": ["Theo knows a passage behind the tapestry"],
    }
    data.update(overrides)
    return json.dumps(data)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("ALLOWED_ORIGIN", "GEMINI_API_KEY", "GEMINI_MODEL", "GEMINI_TEMPERATURE", "GEMINI_MAX_OUTPUT_TOKENS", "DEBUG"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_client():
    return FakeGeminiClient(text=full_reply())


@pytest.fixture
def api(fake_client):
    service = ChatService(client=fake_client)
    app.dependency_overrides[get_chat_service] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
