"""Middleware that logs every inbound request before it is routed."""

import json
import logging
from datetime import UTC, datetime

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

BODY_LOGGED_METHODS = frozenset({"POST", "PUT"})


def format_request_body(raw_body: bytes) -> str:
    """Render a request body for the log.

    JSON bodies are pretty-printed with two-space indentation; anything else is
    logged as decoded text.
    """
    text = raw_body.decode("utf-8", errors="replace")
    try:
        return json.dumps(json.loads(text), indent=2)
    except ValueError:
        return text


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    """Logs method and path of each request, plus the body for POST and PUT.

    The middleware only observes: it never rejects or alters the request and
    always hands it on to the next handler.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        timestamp = datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"

        logger.info(
            f"[{timestamp}] {request.method} {path}",
            extra={"http_method": request.method, "http_path": path},
        )

        if request.method in BODY_LOGGED_METHODS:
            # Starlette caches the body, so the route handler can still read it
            body = await request.body()
            logger.info(f"Request Body: {format_request_body(body)}")

        return await call_next(request)
