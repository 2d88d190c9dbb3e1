"""
QuickNotes — Python API Client
================================

What:  An httpx-based client with the same contract as the browser client.
How:   Keeps the last loaded note list, reloads it after every successful
       mutation, and renders it to an HTML fragment with escaped text.
Who:   Scripts and tests that drive the API from Python.

Contract (mirrors app/static/app.js):
    load_notes()      GET /notes, replaces the cached list
    add_note(text)    trims; empty → no request; POST then reload
    delete_note(id)   DELETE then reload
    render()          placeholder when empty, otherwise one card per note

Failures (transport errors and non-2xx responses) raise NotesClientError,
the Python counterpart of the browser client's alert().
"""

import html
import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "No notes yet. Add your first note!"


class NotesClientError(Exception):
    """
    A request to the notes API failed.

    Attributes:
        status_code: HTTP status of the failing response; None for transport errors
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotesClient:
    """
    Client for the notes API.

    Args:
        base_url: Root URL of the API (e.g. "http://localhost:3000")
        http_client: Pre-built httpx.AsyncClient; when given, base_url is
            ignored and the caller keeps ownership of the client.

    Usage:
        async with NotesClient("http://localhost:3000") as client:
            await client.add_note("buy milk")
            print(client.render())
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
    ):
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(base_url=base_url, timeout=timeout)
        self.notes: List[Dict[str, Any]] = []

    async def __aenter__(self) -> "NotesClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, path, str(e))
            raise NotesClientError(f"{method} {path} failed: {e}") from e

        if response.is_error:
            raise NotesClientError(
                f"{method} {path} returned {response.status_code}",
                status_code=response.status_code,
            )
        return response

    async def load_notes(self) -> List[Dict[str, Any]]:
        """Fetch the note list and cache it on the client."""
        response = await self._request("GET", "/notes")
        self.notes = response.json()
        return self.notes

    async def add_note(self, text: str) -> Optional[Dict[str, Any]]:
        """
        Create a note from trimmed text and reload the list.

        Returns:
            The created note, or None when the trimmed text was empty (in
            which case no request is sent).
        """
        content = text.strip()
        if not content:
            return None

        response = await self._request("POST", "/notes", json={"text": content})
        created = response.json()
        await self.load_notes()
        return created

    async def delete_note(self, note_id: int) -> None:
        """Delete a note by id and reload the list."""
        await self._request("DELETE", f"/notes/{note_id}")
        await self.load_notes()

    def render(self) -> str:
        """
        Render the cached list as an HTML fragment.

        Note text and ids are escaped, so `<b>hi</b>` appears as literal text.
        """
        if not self.notes:
            return f'<div class="empty-state">{html.escape(EMPTY_MESSAGE)}</div>'

        cards = [
            '<div class="note-card">'
            f'<div class="note-content">{html.escape(note["text"])}</div>'
            f'<button class="delete-btn" data-note-id="{html.escape(str(note["id"]))}">Delete</button>'
            "</div>"
            for note in self.notes
        ]
        return "\n".join(cards)
