# Role: Wire schemas for the chat endpoint. ConversationTurn is one chat line ({"from", "text"}),
# ChatRequest is the caller's loosely-typed input, ChatResponse the always-four-speaker output.

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConversationTurn(BaseModel):
    # "from" is a Python keyword, so the field is aliased on the wire.
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(alias="from")
    text: str


class ChatRequest(BaseModel):
    """
    Caller-owned input. Fields are coerced rather than rejected:
    callers (and browsers) send whatever they have, and the prompt builder
    renders history entries defensively, so wrong types degrade to empty values.
    """

    summary: str = ""
    messages: List[Any] = Field(default_factory=list)
    user_message: str = Field(default="", alias="userMessage")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("summary", mode="before")
    @classmethod
    def _coerce_summary(cls, v: Any) -> str:
        return v if isinstance(v, str) else ""

    @field_validator("messages", mode="before")
    @classmethod
    def _coerce_messages(cls, v: Any) -> List[Any]:
        return v if isinstance(v, list) else []

    @field_validator("user_message", mode="before")
    @classmethod
    def _coerce_user_message(cls, v: Any) -> str:
        return v.strip() if isinstance(v, str) else ""


class ChatResponse(BaseModel):
    messages: List[ConversationTurn]
    summary_append: List[str] = Field(default_factory=list)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)
