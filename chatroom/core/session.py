# Role: Caller-side conversation state. The API is stateless, so clients (CLI, Streamlit UI) keep the running
# summary and chat history here and send them back every turn. Bounded: oldest lines are trimmed.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

USER_SPEAKER = "user"


@dataclass
class ChatSession:
    summary: str = ""
    messages: List[Dict[str, str]] = field(default_factory=list)
    max_messages: int = 60
    max_summary_lines: int = 40

    def to_payload(self, user_message: str = "") -> Dict[str, Any]:
        return {
            "summary": self.summary,
            "messages": list(self.messages),
            "userMessage": (user_message or "").strip(),
        }

    def apply(self, user_message: str, response: Dict[str, Any]) -> None:
        # 1) Record the user's line (if any) and the group's replies
        # 2) Roll summary_append facts into the summary
        # 3) Trim both to their bounds
        text = (user_message or "").strip()
        if text:
            self.messages.append({"from": USER_SPEAKER, "text": text})

        for m in response.get("messages") or []:
            self.messages.append({"from": str(m.get("from", "")), "text": str(m.get("text", ""))})

        facts = [f for f in (response.get("summary_append") or []) if isinstance(f, str) and f.strip()]
        lines = [ln for ln in self.summary.splitlines() if ln.strip()]
        lines.extend(f"- {f.strip()}" for f in facts)

        if len(self.messages) > self.max_messages:
            self.messages = self.messages[-self.max_messages :]
        if len(lines) > self.max_summary_lines:
            lines = lines[-self.max_summary_lines :]

        self.summary = "\n".join(lines)

    def reset(self) -> None:
        self.summary = ""
        self.messages = []


def resolve_turn(user_input: Optional[str], keep_going: bool = False) -> Optional[str]:
    """
    Decide what a UI event sends: typed text, an explicit silent turn (""), or nothing (None).
    Blank typed input is ignored rather than sent as a silent turn.
    """
    if user_input is not None and user_input.strip():
        return user_input.strip()
    if keep_going and not user_input:
        return ""
    return None
