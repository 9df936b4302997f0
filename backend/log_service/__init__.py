"""
log-service — Package Initializer
=================================

What: Marks the `log_service` directory as a Python package.
Who:  Used by uvicorn (via `log_service.server`), pytest, and `python -m log_service`.

Architecture Note:

    ┌─────────────────────────────────────┐
    │    Middleware (correlation + log)   │  ← one completion record per request
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Services (simulated work)      │  ← raises TaskFailedError
    └─────────────────────────────────────┘

    Configuration (pydantic-settings) and the console logger are built once
    at startup and handed to the app factory.
"""

__version__ = "1.0.0"
