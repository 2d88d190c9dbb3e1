"""
QuickNotes Backend — Note Store (Data Access)
===============================================

What:  The store-client handle for the `notes` table.
How:   Wraps an AsyncEngine and a session factory. Every operation checks out
       one pooled connection, runs a single statement in its own
       transaction, and returns the connection to the pool on exit.
Who:   Constructed once by the lifespan in main.py; injected into routes via
       app.database.get_store; called by NoteService.

Statements issued:
    list_notes   SELECT id, text, created_at FROM notes ORDER BY id ASC
    create_note  INSERT INTO notes (text) VALUES (:text) RETURNING id, created_at
    delete_note  DELETE FROM notes WHERE id = :id
    init_schema  CREATE TABLE IF NOT EXISTS notes (...)

All values are bound parameters; SQLAlchemy never interpolates them into
the statement text.
"""

import logging
from typing import List

from sqlalchemy import delete, select
from sqlalchemy import text as sql_text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.config import Settings, settings as default_settings
from app.database import Base, build_engine
from app.exceptions import DatabaseError
from app.models.note import Note

logger = logging.getLogger(__name__)

# Errors raised by the driver or the network layer below it
STORE_ERRORS = (SQLAlchemyError, OSError)


class NoteStore:
    """
    Data access for notes over a bounded connection pool.

    Error contract:
        - Missing rows are not errors: list_notes() returns [] and
          delete_note() returns False.
        - Driver and connectivity failures are logged and re-raised as
          DatabaseError, chained to the driver exception.
    """

    def __init__(self, engine: AsyncEngine):
        self._engine = engine
        self._session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, config: Settings = default_settings) -> "NoteStore":
        """Build a store whose pool is sized from the given settings."""
        return cls(build_engine(config=config))

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    # ── Schema ────────────────────────────────────────────────────────────

    async def init_schema(self) -> bool:
        """
        Create the notes table if it does not exist yet.

        Failure is non-fatal: the error is logged and False is returned so
        the caller can keep starting up. Queries issued later against a
        missing table surface as DatabaseError on each request.

        Returns:
            True when the table is ready, False when initialization failed.
        """
        try:
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except Exception:
            logger.exception("Error creating notes table")
            return False

        logger.info("Notes table is ready")
        return True

    # ── Queries ───────────────────────────────────────────────────────────

    async def list_notes(self) -> List[Note]:
        """Return every note ordered by ascending id."""
        try:
            async with self._session_factory() as session:
                result = await session.execute(select(Note).order_by(Note.id.asc()))
                return list(result.scalars().all())
        except STORE_ERRORS as e:
            raise self._wrap("list_notes", e) from e

    async def create_note(self, text: str) -> Note:
        """
        Insert a note and return it with its store-assigned id and created_at.

        The mapper's eager_defaults setting makes the INSERT return the server
        defaults, so no follow-up SELECT is issued on PostgreSQL.
        """
        note = Note(text=text)
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    session.add(note)
        except STORE_ERRORS as e:
            raise self._wrap("create_note", e) from e

        logger.info("Created note %s", note.id)
        return note

    async def delete_note(self, note_id: int) -> bool:
        """
        Delete the note with the given id.

        Returns:
            True if a row was removed, False if no note had that id.
        """
        stmt = (
            delete(Note)
            .where(Note.id == note_id)
            .execution_options(synchronize_session=False)
        )
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    result = await session.execute(stmt)
        except STORE_ERRORS as e:
            raise self._wrap("delete_note", e) from e

        deleted = result.rowcount > 0
        if deleted:
            logger.info("Deleted note %s", note_id)
        return deleted

    # ── Lifecycle ─────────────────────────────────────────────────────────

    async def ping(self) -> bool:
        """Run SELECT 1; False when the store is unreachable."""
        try:
            async with self._engine.connect() as conn:
                await conn.execute(sql_text("SELECT 1"))
        except Exception as e:
            logger.warning("Store ping failed: %s", str(e))
            return False
        return True

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self._engine.dispose()

    # ── Helpers ───────────────────────────────────────────────────────────

    @staticmethod
    def _wrap(operation: str, error: Exception) -> DatabaseError:
        logger.error("Store error in %s: %s", operation, str(error))
        return DatabaseError(
            context={"operation": operation, "error_type": type(error).__name__},
        )
