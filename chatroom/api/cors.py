# Role: Cross-origin headers for every response. Fully open by default; when ALLOWED_ORIGIN names a single
# origin, only that origin is echoed and caches are told the response varies by Origin.

from starlette.responses import Response

from chatroom.config import Settings

ALLOW_METHODS = "GET, POST, OPTIONS"
ALLOW_HEADERS = "Content-Type"


def apply_cors_headers(response: Response, settings: Settings) -> Response:
    if settings.open_cors:
        response.headers["Access-Control-Allow-Origin"] = "*"
    else:
        response.headers["Access-Control-Allow-Origin"] = settings.allowed_origin
        response.headers["Vary"] = "Origin"
    response.headers["Access-Control-Allow-Methods"] = ALLOW_METHODS
    response.headers["Access-Control-Allow-Headers"] = ALLOW_HEADERS
    return response
