"""
QuickNotes Backend — Note Service (Business Rules)
====================================================

What:  Applies the API's business rules on top of the NoteStore.
How:   Validates presence of text, converts a missing row into NotFoundError,
       and turns ORM rows into response schemas.
Who:   Called by route handlers with the store injected for the request.

Rules:
    create  → text must be present and non-empty (ValidationError otherwise)
    delete  → a delete that removes nothing is NotFoundError
    list    → an empty table is a normal, empty result

Store failures arrive as DatabaseError from NoteStore and are propagated
unchanged to the global handler.
"""

import logging
from typing import List, Optional

from app.exceptions import NotFoundError, ValidationError
from app.repos.note_store import NoteStore
from app.schemas.note import MessageResponse, NoteResponse

logger = logging.getLogger(__name__)

TEXT_REQUIRED = "Text is required"
NOTE_DELETED = "Note deleted successfully"


class NoteService:
    """
    Stateless business logic for notes.

    The store is passed to every call rather than held on the instance, so
    a single module-level service works with whichever store the app owns.
    """

    async def list_notes(self, store: NoteStore) -> List[NoteResponse]:
        notes = await store.list_notes()
        return [NoteResponse.model_validate(note) for note in notes]

    async def create_note(self, store: NoteStore, text: Optional[str]) -> NoteResponse:
        """
        Create a note from client-supplied text.

        Only presence is checked: whitespace-only text is stored as sent.

        Raises:
            ValidationError: text is None or empty (→ 400)
            DatabaseError: the insert failed (→ 500)
        """
        if not text:
            raise ValidationError(message=TEXT_REQUIRED, field="text")

        note = await store.create_note(text)
        return NoteResponse.model_validate(note)

    async def delete_note(self, store: NoteStore, note_id: int) -> MessageResponse:
        """
        Raises:
            NotFoundError: no note has this id (→ 404)
            DatabaseError: the delete failed (→ 500)
        """
        if not await store.delete_note(note_id):
            raise NotFoundError(resource="Note", resource_id=note_id)
        return MessageResponse(message=NOTE_DELETED)


note_service = NoteService()
