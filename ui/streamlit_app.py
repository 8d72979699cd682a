# Role: Streamlit group-chat UI.
# - Backend is stateless; this app owns the ChatSession (summary + history) and sends it every turn.
# - Sidebar shows the running memory summary.
# - Imports the chatroom package: install the project first (pip install -e .), then
#   run `streamlit run ui/streamlit_app.py` against a running API.

from __future__ import annotations

import os
from typing import Any, Dict

import requests
import streamlit as st

from chatroom.core.session import USER_SPEAKER, ChatSession, resolve_turn

BACKEND_URL = os.getenv("CHATROOM_API_URL", "http://127.0.0.1:8000/api/chat")

AVATARS = {
    "Aiden": "🦁",
    "Lucas": "🦅",
    "Maya": "🦡",
    "Theo": "🐍",
}


# ----------------------------
# Session helpers
# ----------------------------
def ensure_session() -> None:
    if "chat" not in st.session_state:
        st.session_state["chat"] = ChatSession()
    if "busy" not in st.session_state:
        st.session_state["busy"] = False


# ----------------------------
# Backend calls
# ----------------------------
def send_to_backend(session: ChatSession, user_message: str) -> Dict[str, Any]:
    resp = requests.post(BACKEND_URL, json=session.to_payload(user_message), timeout=60)
    resp.raise_for_status()
    return resp.json()


# ----------------------------
# Sidebar: memory summary
# ----------------------------
def render_sidebar() -> bool:
    st.sidebar.title("Common room")

    col1, col2 = st.sidebar.columns(2)
    with col1:
        if st.button("📝 New chat", use_container_width=True, disabled=st.session_state["busy"]):
            st.session_state["chat"].reset()
            st.rerun()

    with col2:
        keep_going = st.button("💬 Keep chatting", use_container_width=True, disabled=st.session_state["busy"])

    st.sidebar.divider()
    st.sidebar.subheader("Memory")

    summary = st.session_state["chat"].summary
    if summary:
        st.sidebar.markdown(summary)
    else:
        st.sidebar.info("Facts the group remembers will show up here.")

    return keep_going


# ----------------------------
# Chat
# ----------------------------
def render_line(m: Dict[str, str]) -> None:
    sender = m.get("from", "")
    if sender == USER_SPEAKER:
        with st.chat_message("user"):
            st.write(m.get("text", ""))
        return
    with st.chat_message("assistant", avatar=AVATARS.get(sender)):
        st.markdown(f"**{sender}**  \n{m.get('text', '')}")


def render_chat() -> None:
    for m in st.session_state["chat"].messages:
        render_line(m)


def run_turn(user_message: str) -> None:
    session: ChatSession = st.session_state["chat"]

    if user_message:
        render_line({"from": USER_SPEAKER, "text": user_message})

    st.session_state["busy"] = True
    try:
        with st.spinner("Owls are delivering messages..."):
            data = send_to_backend(session, user_message)

        session.apply(user_message, data)
        for m in data.get("messages") or []:
            render_line(m)

    except requests.RequestException:
        st.error(f"I couldn't reach the backend. Make sure the API is running at {BACKEND_URL}.")
    finally:
        st.session_state["busy"] = False


# ----------------------------
# Main
# ----------------------------
def main() -> None:
    st.set_page_config(page_title="Group Chat", page_icon="🪄", layout="wide")

    st.title("🪄 Group Chat")
    st.caption("Four friends who never stop talking. Say something, or just let them chat.")

    ensure_session()
    keep_going = render_sidebar()
    render_chat()

    user_input = st.chat_input("Message the group…", disabled=st.session_state["busy"])

    # Key line: blank input is ignored; only the "Keep chatting" button sends a silent turn.
    turn = resolve_turn(user_input, keep_going)
    if turn is not None:
        run_turn(turn)


if __name__ == "__main__":
    main()
