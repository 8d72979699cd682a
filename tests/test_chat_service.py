# tests/test_chat_service.py

import asyncio
import json

from chatroom.core.chat_service import ChatService
from chatroom.models.message import ChatRequest
from chatroom.models.speaker import PLACEHOLDER_TEXT, Speaker

from conftest import FakeGeminiClient

CAST = (
    Speaker("Ada", "Ravenclaw", "precise."),
    Speaker("Bo", "Hufflepuff", "kind."),
)


def test_injected_speakers_drive_prompt_and_output():
    fake = FakeGeminiClient(text=json.dumps({"messages": [{"from": "Bo", "text": "hey"}, {"from": "Aiden", "text": "x"}]}))
    service = ChatService(client=fake, speakers=CAST, max_history=2)

    request = ChatRequest.model_validate(
        {"messages": [{"from": "user", "text": f"old {i}"} for i in range(5)], "userMessage": "hi"}
    )
    response = asyncio.run(service.reply(request))

    assert [(m.from_, m.text) for m in response.messages] == [("Ada", PLACEHOLDER_TEXT), ("Bo", "hey")]
    prompt = fake.prompts[0]
    assert "ALL 2 speak (Ada, Bo)" in prompt
    assert "old 2" not in prompt and "old 3" in prompt and "old 4" in prompt


def test_debug_output(monkeypatch, capsys):
    import chatroom.config as config

    monkeypatch.setattr(config, "DEBUG", True)
    service = ChatService(client=FakeGeminiClient(text="nope"))
    asyncio.run(service.reply(ChatRequest()))

    out = capsys.readouterr().out
    assert "--- CHAT SERVICE ---" in out
    assert "FALLBACK RESPONSE USED" in out
