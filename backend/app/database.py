"""
QuickNotes Backend — Database Engine & Store Dependency
=========================================================

What:  Async SQLAlchemy engine construction, declarative base, and the FastAPI
       dependency that hands the process-wide NoteStore to route handlers.
How:   build_engine() creates an AsyncEngine with a bounded connection pool.
       The lifespan (main.py) wraps it in a NoteStore and keeps it on
       app.state; get_store() reads it back for each request.
Who:   Used by main.py (lifespan), routes (Depends), and tests.

Connection Pooling Strategy:
    pool_size:      Persistent connections for normal load
    max_overflow:   Temporary connections for bursts
    pool_pre_ping:  Validates connections before use (catches stale connections
                    after a store restart)
    pool_recycle:   Recycles connections every hour

    SQLite URLs (tests) skip the sizing arguments; the aiosqlite dialect picks
    its own pool class and rejects them for in-memory databases.
"""

from typing import TYPE_CHECKING, Union

from fastapi import Request
from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.config import Settings, settings as default_settings

if TYPE_CHECKING:
    from app.repos.note_store import NoteStore


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares one metadata object; the schema initializer runs create_all()
    against it.
    """
    pass


def build_engine(
    url: Union[str, URL, None] = None,
    config: Settings = default_settings,
) -> AsyncEngine:
    """
    Create the async engine that owns the store's connection pool.

    Args:
        url:    Override for the store URL (defaults to config.store_url)
        config: Settings supplying pool sizing and log level

    Returns:
        An AsyncEngine; no connection is opened until the first query.
    """
    url = make_url(url) if url is not None else config.store_url

    options = {
        "pool_pre_ping": config.db_pool_pre_ping,
        "echo": config.log_level == "DEBUG",
    }
    if url.get_backend_name() != "sqlite":
        options.update(
            pool_size=config.db_pool_size,
            max_overflow=config.db_max_overflow,
            pool_recycle=3600,
        )

    return create_async_engine(url, **options)


# ── Store Dependency ──────────────────────────────────────────────────────
def get_store(request: Request) -> "NoteStore":
    """
    FastAPI dependency returning the NoteStore created by the lifespan.

    Example usage in a route:
        @router.get("/notes")
        async def list_notes(store: NoteStore = Depends(get_store)):
            return await store.list_notes()
    """
    return request.app.state.store
