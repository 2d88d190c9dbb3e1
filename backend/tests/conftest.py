"""
QuickNotes Backend — Test Configuration (conftest.py)
=======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── make_note: Factory for stand-in ORM Note rows
    ├── mock_store: AsyncMock standing in for NoteStore (service tests)
    ├── sqlite_url: URL of a fresh SQLite file under tmp_path
    ├── store: Real NoteStore over that file, schema initialized
    ├── unready_store: Real NoteStore over that file, no table yet
    ├── broken_store: NoteStore whose database file can never be opened
    ├── test_client: HTTPX AsyncClient wired to an app using `store`
    ├── broken_client: HTTPX AsyncClient wired to an app using `broken_store`
    └── mock_client: HTTPX AsyncClient wired to an app using `mock_store`
"""

import os

# Settings are read at import time; set test values before importing the app
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CORS_ORIGINS"] = "*"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./quicknotes-test.db"

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.database import build_engine
from app.main import create_app
from app.repos.note_store import NoteStore


@pytest.fixture
def make_note():
    """Factory for stand-ins of ORM Note rows."""
    def _make(note_id: int = 1, text: str = "buy milk") -> MagicMock:
        note = MagicMock()
        note.id = note_id
        note.text = text
        note.created_at = datetime(2024, 1, 15, 12, 0, 0)
        return note
    return _make


@pytest.fixture
def mock_store():
    """
    Provides a mock NoteStore.

    Usage:
        async def test_list(mock_store, make_note):
            mock_store.list_notes.return_value = [make_note()]
            result = await note_service.list_notes(mock_store)
    """
    store = MagicMock(spec=NoteStore)
    store.list_notes = AsyncMock(return_value=[])
    store.create_note = AsyncMock()
    store.delete_note = AsyncMock(return_value=True)
    store.ping = AsyncMock(return_value=True)
    return store


@pytest.fixture
def sqlite_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'notes.db'}"


@pytest_asyncio.fixture
async def store(sqlite_url):
    """A NoteStore over an empty SQLite database with the notes table created."""
    note_store = NoteStore(build_engine(sqlite_url))
    assert await note_store.init_schema() is True
    yield note_store
    await note_store.dispose()


@pytest_asyncio.fixture
async def unready_store(sqlite_url):
    """A NoteStore over an empty SQLite database; startup has not run yet."""
    note_store = NoteStore(build_engine(sqlite_url))
    yield note_store
    await note_store.dispose()


@pytest_asyncio.fixture
async def broken_store(tmp_path):
    """A NoteStore pointing into a directory that does not exist."""
    note_store = NoteStore(build_engine(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'notes.db'}"))
    yield note_store
    await note_store.dispose()


async def _client_for(note_store: NoteStore):
    app = create_app(store=note_store)
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def test_client(store):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_liveness(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    async with await _client_for(store) as client:
        yield client


@pytest_asyncio.fixture
async def broken_client(broken_store):
    async with await _client_for(broken_store) as client:
        yield client


@pytest_asyncio.fixture
async def mock_client(mock_store):
    async with await _client_for(mock_store) as client:
        yield client
