"""
QuickNotes Backend — Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for the three recoverable error classes.
How:   Each exception carries a client-safe message and an optional context
       dict. Global handlers (registered in main.py) turn them into
       `{"error": ...}` JSON bodies with the matching status code.
Who:   Raised by the store and the note service; caught by global handlers.

Exception Hierarchy:
    QuickNotesError (base)
    ├── ValidationError   → 400 Bad Request
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error (generic body)
"""

from typing import Any, Dict, Optional

# Body of every 500; details go to the log only
INTERNAL_ERROR = "Internal server error"


class QuickNotesError(Exception):
    """
    Base exception for all QuickNotes application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(QuickNotesError):
    """
    Raised when client input fails validation.

    When:    POST /notes without a usable `text` value.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(QuickNotesError):
    """
    Raised when a requested resource does not exist.

    When:    DELETE /notes/{id} for an id with no row.
    HTTP:    404 Not Found

    The store reports a missing row as a plain False; the service layer
    converts that into this exception so routes stay free of branching.
    """

    def __init__(
        self,
        resource: str = "Note",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(QuickNotesError):
    """
    Raised when a store operation fails (connectivity loss, broken table, ...).

    HTTP:    500 Internal Server Error

    The response body is always generic. The driver error type and the
    operation name travel in `context` and are only logged server-side.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
