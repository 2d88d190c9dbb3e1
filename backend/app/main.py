"""
QuickNotes Backend — FastAPI Application Factory
==================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (app.main:app) and by the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────┐ ┌──────────────────┐  │
    │  │  Req ID  │→│  CORS       │→│  Logging + 500   │  │
    │  └──────────┘ └─────────────┘ └──────────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌───────────┐ ┌────────────────┐  │
    │  │ /notes CRUD  │ │ GET /     │ │ /app (client)  │  │
    │  └──────────────┘ └───────────┘ └────────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ NotFound→404 │ Database→500 │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Build the NoteStore (unless one was injected)
    3. Create the notes table if absent (non-fatal on failure)

    Shutdown:
    1. Dispose the store's connection pool (only if the lifespan built it)
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app import __version__
from app.config import settings
from app.exceptions import (
    INTERNAL_ERROR,
    DatabaseError,
    NotFoundError,
    QuickNotesError,
    ValidationError,
)
from app.middleware.cors import CORSMiddleware
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import RequestIDMiddleware, request_id_var
from app.repos.note_store import NoteStore
from app.routes import health, notes
from app.services.note_service import TEXT_REQUIRED

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"

NOTE_NOT_FOUND = "Note not found"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Level comes from LOG_LEVEL. Called once, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # Our own access log replaces uvicorn's
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Own the NoteStore for the life of the process.

    A store injected through create_app(store=...) is used as-is and left
    open on shutdown; its creator disposes it.
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("QuickNotes Backend starting up...")

    store: Optional[NoteStore] = getattr(app.state, "store", None)
    owns_store = store is None
    if owns_store:
        store = NoteStore.from_settings(settings)
        app.state.store = store

    logger.info(
        "Note store: %s (pool_size=%d, max_overflow=%d)",
        store.engine.url.render_as_string(hide_password=True),
        settings.db_pool_size,
        settings.db_max_overflow,
    )

    # Runs before the first request is accepted; failure only logs
    await store.init_schema()

    logger.info("Server ready at http://%s:%d", settings.host, settings.port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("QuickNotes Backend shutting down...")
    if owns_store:
        await store.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to status codes and `{"error": ...}` bodies.

    Handler table:
        ValidationError         → 400 (message from the exception)
        RequestValidationError  → 400 body errors / 404 path errors
        NotFoundError           → 404 (message from the exception)
        DatabaseError           → 500 generic
        QuickNotesError (base)  → 500 generic
        Exception (fallback)    → 500 generic

    Store details (driver error type, operation) are logged, never returned.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return error_response(400, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """
        Schema failures are folded into the API's own error vocabulary.

        A path segment that isn't an integer in the id range can't name a
        note, so it is a 404. Anything wrong with the body (not JSON, not an object, `text`
        not a string) means no usable text was sent: 400.
        """
        rid = request_id_var.get("")
        if any((error.get("loc") or ("",))[0] == "path" for error in exc.errors()):
            logger.warning("[%s] Invalid note id in path: %s", rid, request.url.path)
            return error_response(404, NOTE_NOT_FOUND)
        logger.warning(
            "[%s] Unusable request body: %s", rid, [error.get("type") for error in exc.errors()]
        )
        return error_response(400, TEXT_REQUIRED)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return error_response(404, exc.message)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        """Store failure: generic body, details in the server log."""
        logger.error(
            "[%s] Database error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return error_response(500, INTERNAL_ERROR)

    @app.exception_handler(QuickNotesError)
    async def handle_app_error(request: Request, exc: QuickNotesError):
        logger.error(
            "[%s] Application error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return error_response(500, INTERNAL_ERROR)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Errors raised by the middleware themselves; route errors stop at the access log."""
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return error_response(500, INTERNAL_ERROR)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(store: Optional[NoteStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Optional pre-built NoteStore. When omitted the lifespan builds
            one from settings at startup.

    Returns:
        Fully configured FastAPI instance.
    """
    app = FastAPI(
        title="QuickNotes API",
        description="Create, list and delete short text notes.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    if store is not None:
        app.state.store = store

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → CORS → Logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CORSMiddleware, allow_origins=settings.cors_origins_list)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(notes.router)

    # Browser client; same origin as the API so its fetch calls use relative URLs
    app.mount("/app", StaticFiles(directory=STATIC_DIR, html=True), name="client")

    return app


app = create_app()
