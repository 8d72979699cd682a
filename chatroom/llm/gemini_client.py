# Role: Minimal wrapper around Gemini API. Centralizes model name, generation params, and error handling,
# so the rest of the code awaits a single method: generate_text(prompt).

import os
from typing import Optional

from google import genai
from google.genai import types

from chatroom.config import get_settings


class MissingApiKeyError(RuntimeError):
    pass


class CompletionError(RuntimeError):
    pass


class GeminiClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_output_tokens: Optional[int] = None,
    ) -> None:
        # Key lines:
        # - Reads secrets from env (no secrets in code).
        # - Model and generation params default to chatroom.config.get_settings().
        self.api_key = api_key or os.getenv("GEMINI_API_KEY")
        if not self.api_key:
            raise MissingApiKeyError("Missing GEMINI_API_KEY")

        settings = get_settings()
        self.model_name = model or settings.gemini_model
        self.temperature = temperature if temperature is not None else settings.temperature
        self.max_output_tokens = max_output_tokens if max_output_tokens is not None else settings.max_output_tokens

        self.client = genai.Client(api_key=self.api_key)

    async def generate_text(self, prompt: str) -> str:
        # 1) Validate prompt
        # 2) Call Gemini once (single user-role message, no retry)
        # 3) Return the text; an empty response is left for the parser to reject
        if not prompt or not prompt.strip():
            raise ValueError("Prompt must be non-empty.")

        try:
            resp = await self.client.aio.models.generate_content(
                model=self.model_name,
                contents=[types.Content(role="user", parts=[types.Part(text=prompt)])],
                config=types.GenerateContentConfig(
                    temperature=self.temperature,
                    max_output_tokens=self.max_output_tokens,
                ),
            )
        except Exception as e:
            raise CompletionError(f"Gemini API call failed: {e}") from e

        text = getattr(resp, "text", None)
        return text.strip() if text else ""
