"""
QuickNotes Backend — Liveness & Health Routes
===============================================

What:  GET / (liveness string) and GET /health (store connectivity report).
How:   The liveness route never touches the store, so it answers even when
       the store is down. The health route runs a SELECT 1 probe.
Who:   Called by container health checks, load balancers, and humans.

Status levels:
    - healthy:   store reachable
    - unhealthy: store unreachable (still HTTP 200; the body carries the state)
"""

import logging
import time

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app import __version__
from app.database import get_store
from app.repos.note_store import NoteStore
from app.schemas.note import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

LIVENESS_TEXT = "Backend is running"

_start_time = time.time()


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Liveness probe",
)
async def liveness() -> str:
    return LIVENESS_TEXT


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Reports store connectivity and uptime.",
)
async def health_check(store: NoteStore = Depends(get_store)) -> HealthResponse:
    connected = await store.ping()
    if not connected:
        logger.warning("Health check: store unreachable")

    return HealthResponse(
        status="healthy" if connected else "unhealthy",
        version=__version__,
        database="connected" if connected else "disconnected",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
