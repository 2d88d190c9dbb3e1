# Routes package init
"""
QuickNotes Backend — API Routes Package
=========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - notes.py:   GET    /notes            (list notes)
                  POST   /notes            (create note)
                  DELETE /notes/{note_id}  (delete note)
    - health.py:  GET    /                 (liveness string)
                  GET    /health           (store connectivity)

Routes are thin: they pull data out of the request, call NoteService with
the injected NoteStore, and let the global handlers format errors.
"""
