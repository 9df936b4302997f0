"""
log-service — Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── settings:     Settings with defaults, isolated from the real environment
    ├── log_records:  List collecting every record the app logger emits
    ├── app_logger:   Logger at DEBUG feeding log_records
    ├── app:          FastAPI app built from settings + app_logger
    └── test_client:  HTTPX AsyncClient bound to the app via ASGITransport
"""

import logging
import uuid
from typing import List

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from log_service.config import Settings
from log_service.logger import build_logger
from log_service.main import create_app


class RecordingHandler(logging.Handler):
    """Keeps every record it receives, in emission order."""

    def __init__(self, records: List[logging.LogRecord]):
        super().__init__(level=logging.DEBUG)
        self.records = records

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep LOG_LEVEL / ADDR from the developer's shell out of the tests."""
    for name in ("LOG_LEVEL", "ADDR", "SHUTDOWN_GRACE_SECONDS", "IDLE_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def log_records():
    return []


@pytest.fixture
def app_logger(log_records):
    """
    A DEBUG logger unique to the test, recording into `log_records`.

    The console handler from build_logger is replaced so nothing hits stdout.
    """
    logger = build_logger(logging.DEBUG, name=f"log_service.test.{uuid.uuid4().hex}")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.addHandler(RecordingHandler(log_records))
    return logger


@pytest.fixture
def app(settings, app_logger):
    return create_app(settings, app_logger)


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/healthz")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
