# Middleware package init
"""
log-service — Middleware Package
================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [RequestLogging] → [Exception handling] → Router → Route Handler

    RequestLoggingMiddleware is the outermost user middleware, so the status it
    records is the one produced after exception handlers have turned
    TaskFailedError into a 500 response.
"""

from log_service.middleware.logging import RequestLoggingMiddleware, StatusRecorder

__all__ = ["RequestLoggingMiddleware", "StatusRecorder"]
