# Role: Central configuration module. Loads .env into environment variables and computes runtime flags (DEBUG).
# Importers read chatroom.config.DEBUG to control debug output without threading flags through every call.

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEBUG: bool = False

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TEMPERATURE = 0.85
DEFAULT_MAX_OUTPUT_TOKENS = 650
DEFAULT_MAX_HISTORY = 30


def load_env() -> None:
    """
    Load .env into os.environ, then recompute DEBUG.
    This makes DEBUG correct even if load_env() is called after import.
    """
    global DEBUG
    load_dotenv()
    # Key line: accept common truthy values.
    DEBUG = os.getenv("DEBUG", "0").lower() in {"1", "true", "yes"}


def env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    allowed_origin: str = "*"
    gemini_model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS
    max_history: int = DEFAULT_MAX_HISTORY

    @property
    def open_cors(self) -> bool:
        return self.allowed_origin == "*"


def get_settings() -> Settings:
    # Read on every call so tests (and reloads) see the current environment.
    return Settings(
        allowed_origin=(os.getenv("ALLOWED_ORIGIN") or "*").strip() or "*",
        gemini_model=os.getenv("GEMINI_MODEL") or DEFAULT_MODEL,
        temperature=env_float("GEMINI_TEMPERATURE", DEFAULT_TEMPERATURE),
        max_output_tokens=env_int("GEMINI_MAX_OUTPUT_TOKENS", DEFAULT_MAX_OUTPUT_TOKENS),
        max_history=env_int("CHAT_MAX_HISTORY", DEFAULT_MAX_HISTORY),
    )
