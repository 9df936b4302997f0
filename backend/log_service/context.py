"""
log-service — Request Context
=============================

What:  The per-request value store handed to route handlers.
How:   RequestLoggingMiddleware builds one RequestContext per HTTP request and
       stores it in the ASGI scope state under REQUEST_CONTEXT_KEY. Handlers
       receive it through the `get_request_context` dependency.

The context lives only as long as the request's scope; nothing is persisted.
"""

import logging
import secrets
from dataclasses import dataclass

from fastapi import Request

REQUEST_ID_HEADER = "X-Request-ID"
REQUEST_CONTEXT_KEY = "request_context"

REQUEST_ID_BYTES = 8


@dataclass(frozen=True)
class RequestContext:
    """Correlation data for one request. Frozen: handlers only read it."""

    request_id: str


def new_request_id() -> str:
    """
    Generate a 16-character lowercase hex correlation id.

    Best effort only: there is no collision check, and if the system random
    source cannot be read the id is built from zero bytes.
    """
    try:
        raw = secrets.token_bytes(REQUEST_ID_BYTES)
    except (OSError, NotImplementedError):
        raw = bytes(REQUEST_ID_BYTES)
    return raw.hex()


def resolve_request_id(header_value: str) -> str:
    """Reuse an inbound X-Request-ID verbatim, or generate a fresh one."""
    return header_value if header_value else new_request_id()


def get_request_context(request: Request) -> RequestContext:
    """FastAPI dependency returning the context attached by the middleware."""
    return getattr(request.state, REQUEST_CONTEXT_KEY)


def get_logger(request: Request) -> logging.Logger:
    """FastAPI dependency returning the application's logger."""
    return request.app.state.logger
