"""
QuickNotes Backend — Startup & Shutdown Tests
===============================================

What:  Tests for the application lifespan in app.main.
How:   Enters app.router.lifespan_context(app) around an ASGITransport
       client, the way uvicorn runs startup before serving.

What we test:
    ✅ The notes table exists before the first request is served
    ✅ A failed schema step is logged; the service still starts
    ✅ A store built at startup is disposed at shutdown
    ✅ An injected store is left open for its owner
"""

import logging

import pytest
from httpx import ASGITransport, AsyncClient

import app.main as main_module
from app.config import Settings
from app.exceptions import DatabaseError
from app.main import create_app
from app.repos.note_store import NoteStore


@pytest.fixture(autouse=True)
def keep_pytest_log_capture(monkeypatch):
    # setup_logging() uses basicConfig(force=True), which drops caplog's handler
    monkeypatch.setattr(main_module, "setup_logging", lambda: None)


@pytest.fixture
def disposed(monkeypatch):
    """Records every NoteStore.dispose() call while still disposing."""
    calls = []
    original = NoteStore.dispose

    async def tracking_dispose(self):
        calls.append(self)
        await original(self)

    monkeypatch.setattr(NoteStore, "dispose", tracking_dispose)
    return calls


def client_for(app):
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


class TestStartup:

    @pytest.mark.asyncio
    async def test_table_created_before_first_request(self, unready_store):
        with pytest.raises(DatabaseError):
            await unready_store.list_notes()

        app = create_app(store=unready_store)
        async with app.router.lifespan_context(app):
            async with client_for(app) as client:
                response = await client.get("/notes")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_schema_failure_does_not_stop_startup(self, broken_store, caplog):
        app = create_app(store=broken_store)

        with caplog.at_level(logging.ERROR, logger="app.repos.note_store"):
            async with app.router.lifespan_context(app):
                async with client_for(app) as client:
                    liveness = await client.get("/")
                    notes = await client.get("/notes")

        assert "Error creating notes table" in caplog.text
        assert liveness.status_code == 200
        assert liveness.text == "Backend is running"
        assert notes.status_code == 500
        assert notes.json() == {"error": "Internal server error"}


class TestStoreOwnership:

    @pytest.mark.asyncio
    async def test_store_built_from_settings_is_disposed(self, sqlite_url, monkeypatch, disposed):
        monkeypatch.setattr(main_module, "settings", Settings(database_url=sqlite_url))
        app = create_app()

        async with app.router.lifespan_context(app):
            built = app.state.store
            assert isinstance(built, NoteStore)
            assert built.engine.url.get_backend_name() == "sqlite"

            async with client_for(app) as client:
                response = await client.post("/notes", json={"text": "buy milk"})
            assert response.status_code == 201
            assert disposed == []

        assert disposed == [built]

    @pytest.mark.asyncio
    async def test_injected_store_left_open(self, store, disposed):
        app = create_app(store=store)

        async with app.router.lifespan_context(app):
            pass

        assert disposed == []
        assert app.state.store is store
        assert await store.list_notes() == []
