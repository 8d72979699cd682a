# Role: Local developer CLI to chat with the group without the web UI.
# Drives ChatService in-process and keeps summary/history in a ChatSession, like a real client would.

from __future__ import annotations

import asyncio

import chatroom.config
chatroom.config.load_env()

from chatroom.core.chat_service import ChatService
from chatroom.core.session import ChatSession
from chatroom.llm.gemini_client import CompletionError, MissingApiKeyError
from chatroom.models.message import ChatRequest


async def run() -> None:
    # 1) Create ChatService + an empty session
    # 2) Each line (even an empty one) is one turn; empty lines let the group keep chatting
    # 3) Print all four replies and roll summary_append into the session summary
    print("Group Chat CLI")
    print("Commands: /new (new chat), /summary (show memory), /exit")
    print("Press Enter on an empty line to let them keep talking.")
    print("-" * 50)

    service = ChatService()
    session = ChatSession()

    while True:
        try:
            user_message = input("\nYou: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        cmd = user_message.lower()

        if cmd in {"/exit", "exit", "quit", "/quit"}:
            print("Bye!")
            return

        if cmd in {"/new", "new"}:
            session.reset()
            print("Started a new chat.")
            continue

        if cmd in {"/summary", "summary"}:
            print(session.summary or "(no memory yet)")
            continue

        request = ChatRequest.model_validate(session.to_payload(user_message))
        try:
            response = await service.reply(request)
        except (MissingApiKeyError, CompletionError) as e:
            print(f"\n[error] {e}")
            continue

        payload = response.to_wire()
        session.apply(user_message, payload)

        print()
        for m in payload["messages"]:
            print(f"{m['from']}: {m['text']}")


def main() -> None:
    # Key line: one event loop for the whole session (the async Gemini client is reused across turns).
    asyncio.run(run())


if __name__ == "__main__":
    main()
