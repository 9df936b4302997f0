"""
log-service — Work Service Unit Tests
=====================================

What:  WorkService outcomes without HTTP in the way.
"""

import logging
from unittest.mock import MagicMock, patch, AsyncMock

import pytest

from log_service.context import RequestContext
from log_service.exceptions import TaskFailedError
from log_service.services.work_service import WORK_DELAY_SECONDS, WorkService


class TestWorkService:

    def setup_method(self):
        self.service = WorkService()
        self.context = RequestContext(request_id="abc123")
        self.logger = MagicMock(spec=logging.Logger)

    @pytest.mark.asyncio
    async def test_success_logs_warning_then_done(self):
        with patch("log_service.services.work_service.asyncio.sleep", new_callable=AsyncMock) as sleep:
            await self.service.run("simulate", self.context, self.logger)

        sleep.assert_awaited_once_with(WORK_DELAY_SECONDS)
        self.logger.warning.assert_called_once()
        assert [c.args[0] for c in self.logger.info.call_args_list] == ["starting work", "work done"]
        self.logger.error.assert_not_called()

    @pytest.mark.asyncio
    async def test_failure_raises(self):
        with patch("log_service.services.work_service.asyncio.sleep", new_callable=AsyncMock):
            with pytest.raises(TaskFailedError) as exc_info:
                await self.service.run("fail-now", self.context, self.logger)

        assert exc_info.value.task == "fail-now"
        assert exc_info.value.context == {"task": "fail-now"}
        self.logger.error.assert_called_once()
        self.logger.warning.assert_not_called()

    @pytest.mark.asyncio
    async def test_records_carry_correlation_fields(self):
        with patch("log_service.services.work_service.asyncio.sleep", new_callable=AsyncMock):
            await self.service.run("simulate", self.context, self.logger)

        extra = self.logger.info.call_args_list[0].kwargs["extra"]
        assert extra == {"component": "worker", "request_id": "abc123", "task": "simulate"}
