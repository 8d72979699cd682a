# Role: Coerces the parsed (untrusted) model object into a ChatResponse. Every field is type-checked before use,
# unknown speakers and empty lines are dropped, and the output always has exactly one line per speaker.

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from chatroom.models.message import ChatResponse, ConversationTurn
from chatroom.models.speaker import FALLBACK_LINES, PLACEHOLDER_TEXT, SPEAKERS, Speaker

MAX_MESSAGES = 4
MAX_SUMMARY_APPEND = 4


def _trimmed(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def normalize_messages(value: Any, speakers: Sequence[Speaker] = SPEAKERS) -> List[Dict[str, str]]:
    if not isinstance(value, list):
        return []

    allowed = {s.name for s in speakers}
    out: List[Dict[str, str]] = []
    for item in value:
        entry = item if isinstance(item, dict) else {}
        sender = _trimmed(entry.get("from"))
        text = _trimmed(entry.get("text"))
        if sender in allowed and text:
            out.append({"from": sender, "text": text})

    # Key line: bound against duplicates / extra speakers before filling.
    return out[:MAX_MESSAGES]


def fill_speakers(
    normalized: Sequence[Dict[str, str]],
    speakers: Sequence[Speaker] = SPEAKERS,
    placeholder: str = PLACEHOLDER_TEXT,
) -> List[ConversationTurn]:
    # First entry per speaker wins; missing speakers get the placeholder line.
    by_name: Dict[str, str] = {}
    for m in normalized:
        by_name.setdefault(m["from"], m["text"])

    return [ConversationTurn(from_=s.name, text=by_name.get(s.name, placeholder)) for s in speakers]


def normalize_summary_append(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    out = [item.strip() for item in value if isinstance(item, str) and item.strip()]
    return out[:MAX_SUMMARY_APPEND]


def build_fallback_response(speakers: Sequence[Speaker] = SPEAKERS) -> ChatResponse:
    return ChatResponse(
        messages=[
            ConversationTurn(from_=s.name, text=FALLBACK_LINES.get(s.name, PLACEHOLDER_TEXT)) for s in speakers
        ],
        summary_append=[],
    )


def is_usable(data: Optional[Dict[str, Any]]) -> bool:
    # An empty list still counts (every speaker gets the placeholder); other falsy values do not.
    if not isinstance(data, dict):
        return False
    value = data.get("messages")
    return isinstance(value, list) or bool(value)


def normalize_chat_payload(data: Optional[Dict[str, Any]], speakers: Sequence[Speaker] = SPEAKERS) -> ChatResponse:
    # 1) Nothing usable -> fixed filler lines (still a valid 200 payload)
    # 2) Otherwise normalize messages, fill every speaker, normalize summary_append
    if not is_usable(data):
        return build_fallback_response(speakers)

    normalized = normalize_messages(data.get("messages"), speakers)
    return ChatResponse(
        messages=fill_speakers(normalized, speakers),
        summary_append=normalize_summary_append(data.get("summary_append")),
    )
