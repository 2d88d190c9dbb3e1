"""
QuickNotes Backend — Request Logging Middleware
=================================================

What:  One access-log line per request, and the last stop for unexpected errors.
How:   Times call_next and picks the level from the status. An exception no
       registered handler claimed is logged with its traceback and answered
       with the generic 500 body here, so the outer middleware still add
       X-Request-ID and the CORS headers to it.
Who:   Innermost of the three middleware; sees every request except OPTIONS,
       which CORSMiddleware answers first.

Logged: method, path, status, duration, client IP, request ID.
Not logged: request bodies (note text stays out of the access log).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from app.exceptions import INTERNAL_ERROR
from app.middleware.request_id import request_id_var

logger = logging.getLogger("quicknotes.access")


def level_for(status: int) -> int:
    """5xx → ERROR, 4xx → WARNING, everything else → INFO."""
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Access log plus catch-all error response.

    /health is not logged; probes hit it every few seconds.
    """

    SKIPPED_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()
        rid = request_id_var.get("")

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "[%s] Unhandled error on %s %s", rid, request.method, request.url.path
            )
            response = JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})

        if request.url.path not in self.SKIPPED_PATHS:
            self.log_access(request, response.status_code, start_time, rid)
        return response

    @staticmethod
    def log_access(request: Request, status: int, start_time: float, rid: str) -> None:
        duration_ms = (time.perf_counter() - start_time) * 1000
        client_ip = request.client.host if request.client else "unknown"

        logger.log(
            level_for(status),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            request.url.path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": request.url.path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
