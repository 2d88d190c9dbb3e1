"""
QuickNotes — Python Client Tests
==================================

What:  Tests for NotesClient, the Python counterpart of the browser client.
How:   Against the real app over ASGITransport, and against httpx.MockTransport
       where the exact requests sent need to be observed.

What we test:
    ✅ Add trims input, reloads the list, and skips empty input entirely
    ✅ Delete reloads the list
    ✅ Rendering escapes note text and shows the empty placeholder
    ✅ Non-2xx and transport failures raise NotesClientError
"""

import httpx
import pytest
from httpx import ASGITransport

from app.client import EMPTY_MESSAGE, NotesClient, NotesClientError
from app.main import create_app


@pytest.fixture
def api_client(store):
    app = create_app(store=store)
    return httpx.AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


class TestNotesClientAgainstApi:

    @pytest.mark.asyncio
    async def test_add_trims_and_reloads(self, api_client):
        async with api_client:
            client = NotesClient(http_client=api_client)

            created = await client.add_note("   buy milk  ")

            assert created["text"] == "buy milk"
            assert client.notes == [created]

    @pytest.mark.asyncio
    async def test_delete_reloads(self, api_client):
        async with api_client:
            client = NotesClient(http_client=api_client)
            first = await client.add_note("first")
            await client.add_note("second")

            await client.delete_note(first["id"])

            assert [note["text"] for note in client.notes] == ["second"]

    @pytest.mark.asyncio
    async def test_delete_missing_raises(self, api_client):
        async with api_client:
            client = NotesClient(http_client=api_client)

            with pytest.raises(NotesClientError) as exc_info:
                await client.delete_note(42)

            assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_render_escapes_markup(self, api_client):
        async with api_client:
            client = NotesClient(http_client=api_client)
            await client.add_note("<b>hi</b>")

            rendered = client.render()

            assert "&lt;b&gt;hi&lt;/b&gt;" in rendered
            assert "<b>hi</b>" not in rendered
            assert 'class="note-card"' in rendered


class TestNotesClientRequests:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    async def test_blank_input_sends_nothing(self, text):
        sent = []

        def handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return httpx.Response(200, json=[])

        transport = httpx.MockTransport(handler)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
            client = NotesClient(http_client=http)

            assert await client.add_note(text) is None

        assert sent == []

    @pytest.mark.asyncio
    async def test_server_error_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"error": "Internal server error"})

        transport = httpx.MockTransport(handler)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
            client = NotesClient(http_client=http)

            with pytest.raises(NotesClientError) as exc_info:
                await client.load_notes()

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        transport = httpx.MockTransport(handler)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
            client = NotesClient(http_client=http)

            with pytest.raises(NotesClientError) as exc_info:
                await client.add_note("hello")

        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_failed_add_keeps_cached_list(self):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.method == "GET":
                return httpx.Response(200, json=[{"id": 1, "text": "kept", "created_at": "2024-01-15T12:00:00"}])
            return httpx.Response(500, json={"error": "Internal server error"})

        transport = httpx.MockTransport(handler)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
            client = NotesClient(http_client=http)
            await client.load_notes()

            with pytest.raises(NotesClientError):
                await client.add_note("new")

            assert [note["text"] for note in client.notes] == ["kept"]


class TestRender:

    def test_empty_placeholder(self):
        client = NotesClient(http_client=httpx.AsyncClient())

        assert EMPTY_MESSAGE in client.render()
        assert "note-card" not in client.render()

    def test_one_card_per_note(self):
        client = NotesClient(http_client=httpx.AsyncClient())
        client.notes = [
            {"id": 1, "text": "a & b", "created_at": "2024-01-15T12:00:00"},
            {"id": 2, "text": "\"quoted\"", "created_at": "2024-01-15T12:00:01"},
        ]

        rendered = client.render()

        assert rendered.count('class="note-card"') == 2
        assert "a &amp; b" in rendered
        assert "&quot;quoted&quot;" in rendered
        assert 'data-note-id="2"' in rendered
