"""
QuickNotes Backend — Request ID Middleware
============================================

What:  Tags each request with a short ID that appears in its log lines and
       in the X-Request-ID response header.
How:   A client-sent X-Request-ID is reused when it is a plain token (it is
       written verbatim into log lines); anything else is replaced by an
       8-character UUID prefix. The ID lives in a ContextVar for loggers
       and handlers.
Who:   Outermost middleware, so every response carries the header,
       including OPTIONS replies and error responses.

Error bodies stay `{"error": ...}`; the header is how a client quotes a
failing request back to the server logs.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local; each request sees only its own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

# No whitespace or control characters, so one ID can't forge a log line
CLIENT_ID_PATTERN = re.compile(r"[A-Za-z0-9._-]{1,64}")


def resolve_request_id(client_id: Optional[str]) -> str:
    """Return client_id if it is a usable token, else a fresh short ID."""
    if client_id and CLIENT_ID_PATTERN.fullmatch(client_id):
        return client_id
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get("X-Request-ID"))
        token = request_id_var.set(rid)
        request.state.request_id = rid

        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers["X-Request-ID"] = rid
        return response
