# Services package init
"""
QuickNotes Backend — Services Layer
=====================================

What:  Business logic layer sitting between routes (HTTP) and the store.
Why:   Routes handle HTTP, services handle business rules.

Service Inventory:
    - NoteService: presence-of-text validation, not-found mapping, and
      conversion of stored rows into response schemas
"""
