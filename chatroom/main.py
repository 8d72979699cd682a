# Role: FastAPI app bootstrap. Loads environment config early, registers the chat router,
# attaches CORS headers to every response and renders 405s as JSON.

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

import chatroom.config
chatroom.config.load_env()

from chatroom.api.chat import router as chat_router
from chatroom.api.cors import apply_cors_headers

app = FastAPI(title="Chatroom API", version="0.1.0")
app.include_router(chat_router)


@app.middleware("http")
async def cors_headers(request: Request, call_next):
    response = await call_next(request)
    return apply_cors_headers(response, chatroom.config.get_settings())


@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    headers = getattr(exc, "headers", None)
    if exc.status_code == 405:
        return JSONResponse(status_code=405, content={"error": "POST only"}, headers=headers)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=headers)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
