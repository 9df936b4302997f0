"""
log-service — Simulated Work Service
====================================

What:  Pretends to process a named task and logs each stage.
How:   Waits WORK_DELAY_SECONDS with asyncio.sleep (only the calling request
       is suspended), then either fails or succeeds based on the task name.

Log records (component="worker", with request_id and task):
    INFO     starting work
    ERROR    work failed            task name contains "fail"
    WARNING  work had minor issues  every other task, unconditionally
    INFO     work done              every other task
"""

import asyncio
import logging

from log_service.context import RequestContext
from log_service.exceptions import TaskFailedError

DEFAULT_TASK = "simulate"
WORK_DELAY_SECONDS = 0.150
FAILURE_MARKER = "fail"


class WorkService:
    """Runs simulated tasks. No retries, no partial results."""

    def __init__(self, delay: float = WORK_DELAY_SECONDS):
        self.delay = delay

    async def run(self, task: str, context: RequestContext, logger: logging.Logger) -> None:
        """
        Run one task for the request identified by `context`.

        Raises:
            TaskFailedError: if the task name contains "fail" (case-sensitive).
        """
        fields = {"component": "worker", "request_id": context.request_id, "task": task}
        logger.info("starting work", extra=fields)

        await asyncio.sleep(self.delay)

        if FAILURE_MARKER in task:
            logger.error("work failed", extra=fields)
            raise TaskFailedError(task)

        logger.warning("work had minor issues", extra=fields)
        logger.info("work done", extra=fields)


work_service = WorkService()
