"""
QuickNotes Backend — Note SQLAlchemy Model
============================================

What:  ORM model representing the `notes` table.
How:   Inherits from the shared DeclarativeBase; the schema initializer
       creates the table from this definition with create_all().
Who:   Used by NoteStore for every statement it issues.

Table Design:
    - id: Integer primary key assigned by the store (SERIAL on PostgreSQL).
      On SQLite the AUTOINCREMENT keyword is requested so a deleted maximum
      id is never handed out again.
    - text: Required, unbounded.
    - created_at: Filled in by the store at insertion time.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, Text
from sqlalchemy import text as sql_text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

# Largest id a SERIAL (int4) column can hold
MAX_NOTE_ID = 2_147_483_647


class Note(Base):
    """
    A single short text note.

    Lifecycle:
        1. Inserted by POST /notes (store assigns id and created_at)
        2. Read by GET /notes
        3. Removed by DELETE /notes/{id}
        Never updated in place.
    """

    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    text: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=sql_text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = {"sqlite_autoincrement": True}

    # Fetch server-generated id/created_at as part of the INSERT
    __mapper_args__ = {"eager_defaults": True}

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, created_at='{self.created_at}')>"
