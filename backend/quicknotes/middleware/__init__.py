"""
QuickNotes Backend — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    The request id is set before the logging middleware reads it, and the
    logging middleware sees the final status code on the way back out.
"""
