# Role: Builds the single group-chat prompt. Injects personas, hard rules, the JSON output schema,
# the caller's running summary and the most recent chat lines. Deterministic for identical inputs.

from __future__ import annotations

import json
from typing import Any, List, Optional, Sequence

from chatroom.config import DEFAULT_MAX_HISTORY
from chatroom.models.speaker import SPEAKERS, Speaker


def _field(turn: Any, key: str) -> str:
    if not isinstance(turn, dict):
        return ""
    value = turn.get(key)
    return "" if value is None else str(value)


def recent_history(messages: Optional[Sequence[Any]], max_history: int = DEFAULT_MAX_HISTORY) -> List[Any]:
    # Key line: oldest turns are dropped silently; the caller rolls them into summary.
    turns = list(messages or [])
    if max_history <= 0:
        return []
    return turns[-max_history:]


def format_history(messages: Optional[Sequence[Any]], max_history: int = DEFAULT_MAX_HISTORY) -> str:
    return "\n".join(f"{_field(m, 'from')}: {_field(m, 'text')}" for m in recent_history(messages, max_history))


def _schema_block(speakers: Sequence[Speaker]) -> str:
    schema = {
        "messages": [{"from": s.name, "text": "..."} for s in speakers],
        "summary_append": ["0-2 short facts worth remembering"],
    }
    return json.dumps(schema, indent=2, ensure_ascii=False)


def build_chat_prompt(
    summary: str = "",
    messages: Optional[Sequence[Any]] = None,
    user_message: str = "",
    speakers: Sequence[Speaker] = SPEAKERS,
    max_history: int = DEFAULT_MAX_HISTORY,
) -> str:
    names = ", ".join(s.name for s in speakers)
    count = len(speakers)
    personas = "\n".join(s.prompt_line() for s in speakers)

    recent = format_history(messages, max_history)
    user_line = f"user: {user_message}" if user_message else "(user is silent)"

    return f"""
You are a "Hogwarts Students Group Chat" simulator.
This chat never ends. Even if the user is silent, the {count} students keep chatting.

[World]
- Hogwarts, 5th-year student life: classes, library, Great Hall, dorm common rooms, house points, curfew, Quidditch.
- Keep it casual like a real chat app. No long narration.

[Characters (original students ONLY)]
{personas}

[Hard Rules]
- NEVER end the conversation. No goodbyes, no "let's stop", no "sleep now".
- In EVERY response, ALL {count} speak ({names}) and each writes 1-2 sentences.
- At least ONE of them must ask a follow-up question OR propose the next action.
- Always leave at least ONE hook (new rumor, small event, plan, question) that continues the chat.
- If user is silent, continue naturally from the recent chat.
- Output must be JSON ONLY. No extra text.

[Output JSON schema (must match exactly)]
{_schema_block(speakers)}

[Memory Summary]
{summary or "(none)"}

[Recent Chat]
{recent or "(none)"}

[User Message]
{user_line}

Now produce the JSON response.
""".strip()
