"""
QuickNotes Backend — Notes Route Handlers
===========================================

What:  GET /notes (list), POST /notes (create), DELETE /notes/{note_id} (delete).
How:   Extract request data, delegate to NoteService with the injected store,
       return JSON. Error responses come from the global exception handlers.
Who:   Called by the browser client (app/static/app.js) and NotesClient.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Path

from app.database import get_store
from app.models.note import MAX_NOTE_ID
from app.repos.note_store import NoteStore
from app.schemas.note import (
    ErrorResponse,
    MessageResponse,
    NoteCreate,
    NoteResponse,
)
from app.services.note_service import note_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Notes"])


@router.get(
    "/notes",
    response_model=List[NoteResponse],
    responses={
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="List all notes",
    description="Returns every note ordered by ascending id. An empty store yields [].",
)
async def list_notes(store: NoteStore = Depends(get_store)) -> List[NoteResponse]:
    return await note_service.list_notes(store)


@router.post(
    "/notes",
    status_code=201,
    response_model=NoteResponse,
    responses={
        400: {"description": "Text is missing or empty", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Create a note",
)
async def create_note(
    payload: Optional[NoteCreate] = Body(default=None),
    store: NoteStore = Depends(get_store),
) -> NoteResponse:
    """
    Create a note from `{"text": "..."}`.

    A request without a body behaves like one without `text`.
    """
    text = payload.text if payload is not None else None
    return await note_service.create_note(store, text)


@router.delete(
    "/notes/{note_id}",
    response_model=MessageResponse,
    responses={
        404: {"description": "No note with this id", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Delete a note by id",
)
async def delete_note(
    note_id: int = Path(..., ge=1, le=MAX_NOTE_ID),
    store: NoteStore = Depends(get_store),
) -> MessageResponse:
    """
    Delete one note.

    An id outside 1..MAX_NOTE_ID cannot name a stored note; it fails path
    validation and is answered with the same 404 as an unknown id.
    """
    return await note_service.delete_note(store, note_id)
