# Role: Orchestrates one chat turn: prompt -> single Gemini call -> JSON extraction -> normalization.
# Stateless across requests; the caller carries summary/messages forward.

from __future__ import annotations

from typing import Optional, Sequence

import chatroom.config as config
from chatroom.core.normalizer import is_usable, normalize_chat_payload
from chatroom.llm.gemini_client import GeminiClient
from chatroom.llm.response_parser import parse_model_json
from chatroom.models.message import ChatRequest, ChatResponse
from chatroom.models.speaker import SPEAKERS, Speaker
from chatroom.prompts.chat_prompt import build_chat_prompt


class ChatService:
    def __init__(
        self,
        client: Optional[GeminiClient] = None,
        speakers: Sequence[Speaker] = SPEAKERS,
        max_history: Optional[int] = None,
    ) -> None:
        # Key line: lazy-init so the app imports without GEMINI_API_KEY; the error surfaces per request.
        self._client = client
        self.speakers = tuple(speakers)
        self.max_history = max_history if max_history is not None else config.get_settings().max_history

    def ensure_ready(self) -> GeminiClient:
        if self._client is None:
            self._client = GeminiClient()
        return self._client

    async def reply(self, request: ChatRequest) -> ChatResponse:
        # 1) Build prompt from summary + recent history + user line
        # 2) One completion call (errors propagate to the route)
        # 3) Parse defensively; unusable output becomes the fixed fallback
        client = self.ensure_ready()

        prompt = build_chat_prompt(
            summary=request.summary,
            messages=request.messages,
            user_message=request.user_message,
            speakers=self.speakers,
            max_history=self.max_history,
        )

        if config.DEBUG:
            print("\n--- CHAT SERVICE ---")
            print("USER MESSAGE:", request.user_message or "(silent)")
            print("HISTORY TURNS:", len(request.messages))
            print("PROMPT CHARS:", len(prompt))

        raw = await client.generate_text(prompt)
        data, parse_meta = parse_model_json(raw)

        if config.DEBUG:
            preview = (raw or "").strip()
            print("RAW RESPONSE (preview):\n", preview[:600] + ("..." if len(preview) > 600 else ""))
            print("PARSE:", parse_meta)

        response = normalize_chat_payload(data, self.speakers)

        if config.DEBUG:
            if not is_usable(data):
                print("FALLBACK RESPONSE USED")
            print("SUMMARY APPEND:", response.summary_append)
            print("--------------------\n")

        return response
