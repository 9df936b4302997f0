"""
log-service — Custom Exception Hierarchy
========================================

What:  Application-specific exceptions for the few error scenarios the service has.
How:   Each exception carries a message and an optional context dict.
       The exception handler registered in main.py maps TaskFailedError to a
       plain-text HTTP 500; ServerStartupError is raised by the server runner
       and ends the process.

Exception Hierarchy:
    LogServiceError (base)
    ├── TaskFailedError     → 500 Internal Server Error, body "failed\\n"
    └── ServerStartupError  → fatal log record, process exit status 1

Nothing here is retried.
"""

from typing import Any, Dict, Optional


class LogServiceError(Exception):
    """
    Base exception for all log-service errors.

    Attributes:
        message:  Human-readable error description
        context:  Additional debug info for log records
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class TaskFailedError(LogServiceError):
    """
    Raised when a simulated task is asked to fail.

    When:    The task name contains "fail".
    HTTP:    500 Internal Server Error
    """

    def __init__(self, task: str):
        self.task = task
        super().__init__(message="work failed", context={"task": task})


class ServerStartupError(LogServiceError):
    """
    Raised when the listen socket cannot be bound.

    When:    Address in use, permission denied, unresolvable host.
    Effect:  Logged at fatal severity; the process exits with status 1.
    """

    def __init__(self, addr: str, reason: str):
        self.addr = addr
        self.reason = reason
        super().__init__(
            message=f"cannot listen on {addr}: {reason}",
            context={"addr": addr, "error": reason},
        )
