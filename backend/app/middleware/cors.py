"""
QuickNotes Backend — CORS Middleware
======================================

What:  Cross-origin headers on every response and a bare 200 for OPTIONS.
How:   OPTIONS requests are answered here without reaching the router;
       all other responses get the Access-Control-* headers added.

Contract:
    Access-Control-Allow-Origin:   the configured origin ("*" by default)
    Access-Control-Allow-Methods:  GET, POST, DELETE, OPTIONS
    Access-Control-Allow-Headers:  Content-Type
    OPTIONS (any path)            → 200, empty body

Starlette's CORSMiddleware only short-circuits true preflights (Origin plus
Access-Control-Request-Method) and answers them with an "OK" body; this one
answers every OPTIONS with an empty body.
"""

from typing import Dict, List, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

ALLOWED_METHODS = ("GET", "POST", "DELETE", "OPTIONS")
ALLOWED_HEADERS = ("Content-Type",)


class CORSMiddleware(BaseHTTPMiddleware):
    """
    Args:
        allow_origins: Allowed origins; ["*"] (the default) allows any origin.
            With an explicit list the request's Origin is echoed back only
            when it is in the list.
    """

    def __init__(self, app: ASGIApp, allow_origins: Optional[List[str]] = None):
        super().__init__(app)
        self.allow_origins = allow_origins or ["*"]
        self.allow_all = "*" in self.allow_origins

    def cors_headers(self, origin: Optional[str]) -> Dict[str, str]:
        headers = {
            "Access-Control-Allow-Methods": ", ".join(ALLOWED_METHODS),
            "Access-Control-Allow-Headers": ", ".join(ALLOWED_HEADERS),
        }
        if self.allow_all:
            headers["Access-Control-Allow-Origin"] = "*"
        elif origin in self.allow_origins:
            headers["Access-Control-Allow-Origin"] = origin
            headers["Vary"] = "Origin"
        return headers

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        headers = self.cors_headers(request.headers.get("origin"))

        if request.method == "OPTIONS":
            return Response(status_code=200, headers=headers)

        response = await call_next(request)
        response.headers.update(headers)
        return response
