"""
QuickNotes Backend — Application Package Initializer
======================================================

What: Marks the `app` directory as a Python package.
Who:  Used by uvicorn (app.main:app), pytest, and the `quicknotes` script.

Architecture Note:
    The backend follows a layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Rules)   │  ← Presence checks, not-found mapping
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Repos (Data Access)          │  ← NoteStore over a pooled engine
    └─────────────────────────────────────┘

    The browser client in app/static/ and the httpx client in app/client.py
    both talk to the Routes layer over HTTP.
"""

__version__ = "1.0.0"
