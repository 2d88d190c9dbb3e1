# Repositories package init
"""
QuickNotes Backend — Data Access Package
==========================================

What:  Store handles that issue SQL against the relational store.
How:   Each repository owns an AsyncEngine (and therefore a connection pool)
       and exposes one coroutine per statement it runs.

Repository Inventory:
    - note_store.py:  NoteStore (schema init, list/create/delete notes, ping)
"""
