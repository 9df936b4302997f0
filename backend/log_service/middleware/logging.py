"""
log-service — Correlation & Request Logging Middleware
======================================================

What:  Assigns a correlation id to every request, times it, captures the
       response status and emits one structured completion record.
How:   Pure ASGI middleware. The downstream `send` is wrapped in a
       StatusRecorder; the RequestContext is placed in the scope state before
       the downstream app runs; the record is logged after it returns.

Completion record (INFO, message "request completed"):
    component    "http"
    request_id   X-Request-ID header verbatim, or 16 random hex chars
    method       request method
    path         URL path without query string
    status       first status sent downstream, 200 if none was sent
    user_agent   User-Agent header, "" if absent
    remote_ip    X-Forwarded-For header, else client host, else ""
    duration_ms  whole milliseconds spent in the downstream app

Exactly one record per HTTP request, after every record the handler emitted.
"""

import logging
import time
from typing import Optional

from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from log_service.context import (
    REQUEST_CONTEXT_KEY,
    REQUEST_ID_HEADER,
    RequestContext,
    resolve_request_id,
)

FORWARDED_FOR_HEADER = "X-Forwarded-For"

DEFAULT_STATUS = 200


class StatusRecorder:
    """
    Wraps the ASGI `send` callable for one request and remembers the status.

    Only the first `http.response.start` message sets the status; until then
    it stays at DEFAULT_STATUS.
    """

    def __init__(self, send: Send):
        self._send = send
        self.status = DEFAULT_STATUS
        self.started = False

    async def __call__(self, message: Message) -> None:
        if message["type"] == "http.response.start" and not self.started:
            self.started = True
            self.status = message["status"]
        await self._send(message)


def resolve_remote_ip(headers: Headers, client: Optional[tuple]) -> str:
    """Prefer X-Forwarded-For, then the transport peer host, then ""."""
    forwarded = headers.get(FORWARDED_FOR_HEADER)
    if forwarded:
        return forwarded
    if client:
        return client[0] or ""
    return ""


class RequestLoggingMiddleware:
    """Times, identifies and logs every HTTP request exactly once."""

    def __init__(self, app: ASGIApp, logger: logging.Logger):
        self.app = app
        self.logger = logger

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = Headers(scope=scope)
        context = RequestContext(request_id=resolve_request_id(headers.get(REQUEST_ID_HEADER, "")))
        scope.setdefault("state", {})[REQUEST_CONTEXT_KEY] = context

        recorder = StatusRecorder(send)
        start = time.perf_counter()
        try:
            await self.app(scope, receive, recorder)
        except Exception:
            # Nothing was sent yet: the server will answer 500 on our behalf.
            if not recorder.started:
                recorder.status = 500
            raise
        finally:
            duration_ms = int((time.perf_counter() - start) * 1000)
            self.logger.info(
                "request completed",
                extra={
                    "component": "http",
                    "request_id": context.request_id,
                    "method": scope["method"],
                    "path": scope["path"],
                    "status": recorder.status,
                    "user_agent": headers.get("User-Agent", ""),
                    "remote_ip": resolve_remote_ip(headers, scope.get("client")),
                    "duration_ms": duration_ms,
                },
            )
