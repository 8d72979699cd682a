# Role: Thin HTTP adapter for the group-chat endpoint. Handles preflight/liveness, parses the body leniently,
# and maps configuration/completion failures to JSON errors. The turn itself is delegated to ChatService.

from __future__ import annotations

import json

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from chatroom.api.deps import get_chat_service
from chatroom.core.chat_service import ChatService
from chatroom.llm.gemini_client import MissingApiKeyError
from chatroom.models.message import ChatRequest

CHAT_ROUTE = "/api/chat"

router = APIRouter(tags=["chat"])


def _bad_request(detail: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "bad_request", "detail": detail})


@router.options("/")
@router.options(CHAT_ROUTE)
async def preflight() -> Response:
    return Response(status_code=200)


@router.get("/")
@router.get(CHAT_ROUTE)
async def liveness() -> dict:
    # Role: open the URL in a browser to check the function is alive.
    return {"ok": True, "route": CHAT_ROUTE}


@router.post("/")
@router.post(CHAT_ROUTE)
async def chat(request: Request, service: ChatService = Depends(get_chat_service)) -> JSONResponse:
    # 1) Configuration check before touching the body or the model
    # 2) Parse body (empty body -> {}; userMessage may be empty, the group keeps chatting)
    # 3) Delegate the turn; model-output problems never reach here, they become the fallback payload
    try:
        service.ensure_ready()
    except MissingApiKeyError as e:
        return JSONResponse(status_code=500, content={"error": str(e)})

    body = await request.body()
    try:
        payload = json.loads(body) if body.strip() else {}
    except (json.JSONDecodeError, UnicodeDecodeError):
        return _bad_request("Body must be valid JSON.")

    if not isinstance(payload, dict):
        return _bad_request("Body must be a JSON object.")

    chat_request = ChatRequest.model_validate(payload)

    try:
        result = await service.reply(chat_request)
    except Exception as e:
        return JSONResponse(status_code=500, content={"error": "server_error", "detail": str(e)})

    return JSONResponse(status_code=200, content=result.to_wire())
