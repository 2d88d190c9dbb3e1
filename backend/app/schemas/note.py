"""
QuickNotes Backend — Pydantic Request/Response Schemas
========================================================

What:  Pydantic models defining the API contract between client and backend.
How:   FastAPI uses these models to parse request bodies, serialize
       responses, and generate the OpenAPI document.

Schemas are separate from the SQLAlchemy model so the API controls exactly
which fields are exposed.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """
    Body of POST /notes.

    `text` is optional at the schema level on purpose: a missing or empty
    value is a business-rule failure answered with 400 by NoteService,
    not a 422 schema failure.
    """
    text: Optional[str] = Field(default=None, description="Note text (required, non-empty)")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """A stored note as returned by GET /notes and POST /notes."""
    id: int = Field(description="Store-assigned note identifier")
    text: str = Field(description="Note text, exactly as submitted")
    created_at: datetime = Field(description="When the store inserted the note")

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    """Success body for DELETE /notes/{id}."""
    message: str = Field(description="Human-readable confirmation")


class ErrorResponse(BaseModel):
    """
    Error body shared by every failing endpoint.

    Example:
        {"error": "Note not found"}
    """
    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Report returned by GET /health."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")

