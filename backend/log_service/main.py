"""
log-service — FastAPI Application Factory
=========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       wired to an explicitly built logger.
Who:   Called by log_service.server.serve() and by the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:   RequestLoggingMiddleware             │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────────────┐  │
    │  │ /work        │ │ /healthz │ │ / (catch-all)   │  │
    │  └──────────────┘ └──────────┘ └─────────────────┘  │
    │                                                     │
    │  Exception Handlers:  TaskFailedError → 500         │
    └─────────────────────────────────────────────────────┘
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from log_service import __version__
from log_service.config import Settings
from log_service.exceptions import TaskFailedError
from log_service.logger import build_logger
from log_service.middleware.logging import RequestLoggingMiddleware
from log_service.routes import health, hello, work


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to plain-text HTTP responses.

    Handler hierarchy:
        TaskFailedError → 500 "failed\\n" (already logged by WorkService)
    """

    @app.exception_handler(TaskFailedError)
    async def handle_task_failed(request: Request, exc: TaskFailedError):
        return PlainTextResponse(
            "failed\n",
            status_code=500,
            headers={"X-Content-Type-Options": "nosniff"},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    logger: Optional[logging.Logger] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Loaded configuration; read from the environment when omitted.
        logger:   Logger shared by middleware and handlers; built from
                  `settings.level` when omitted.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    settings = settings or Settings()
    logger = logger or build_logger(settings.level)

    app = FastAPI(
        title="log-service",
        description="Minimal HTTP service demonstrating structured request logging.",
        version=__version__,
        # The greeting route answers every unmatched path, docs included.
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.logger = logger

    app.add_middleware(RequestLoggingMiddleware, logger=logger)

    register_exception_handlers(app)

    # Catch-all greeting goes last.
    app.include_router(work.router)
    app.include_router(health.router)
    app.include_router(hello.router)

    return app
