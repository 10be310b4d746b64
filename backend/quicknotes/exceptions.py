"""
QuickNotes Backend — Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for each error scenario.
How:   Each exception class carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return `{"error": <message>}` JSON bodies with the matching status.
Who:   Raised by stores, the startup retry loop, and the API client.

Exception Hierarchy:
    QuickNotesError (base)
    ├── ValidationError       → 400 Bad Request (client can fix)
    ├── NotFoundError         → 404 Not Found
    ├── DatabaseError         → 500 Internal Server Error (generic body)
    ├── InitializationError   → fatal at startup, server never accepts traffic
    └── ApiClientError        → raised client-side for non-2xx responses
"""

from typing import Any, Dict, Optional


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

    When:    Missing or empty title on create, empty title on update.
    HTTP:    400 Bad Request

    Example response:
        {"error": "Title is required"}
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

    When:    GET/PUT/DELETE /notes/{id} with an id the store never issued,
             or one that has been deleted.
    HTTP:    404 Not Found

    The message stays "<Resource> not found" regardless of the id; the id
    itself goes into the context for logging.
    """

    def __init__(
        self,
        resource: str = "Note",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource_id = resource_id


class DatabaseError(QuickNotesError):
    """
    Raised when the backing store cannot complete an operation.

    When:    Connection lost mid-query, database restarted, disk full.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. The underlying
    driver error is kept in the context and logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class InitializationError(QuickNotesError):
    """
    Raised when the store cannot establish its backing resource at startup.

    When:    Every attempt of the bounded startup retry loop failed.
    Effect:  The lifespan re-raises it, uvicorn aborts startup and the
             process exits without ever accepting a request.
    """

    def __init__(
        self,
        message: str = "Store initialization failed",
        attempts: int = 0,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["attempts"] = attempts
        super().__init__(message=message, context=ctx)
        self.attempts = attempts


class ApiClientError(QuickNotesError):
    """
    Raised by NotesClient when the API answers with a non-2xx status.

    Attributes:
        status_code: HTTP status returned by the server
        message:     The server's `error` string (or the raw reason phrase)
    """

    def __init__(
        self,
        status_code: int,
        message: str = "Request failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["status_code"] = status_code
        super().__init__(message=message, context=ctx)
        self.status_code = status_code
