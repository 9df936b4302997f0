"""
log-service — Configuration Tests
=================================

What:  LOG_LEVEL and ADDR parsing, defaults, and environment loading.
"""

import logging

import pytest

from log_service.config import Settings, parse_log_level, split_addr


class TestLogLevel:
    """Tests for LOG_LEVEL handling."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("debug", logging.DEBUG),
            ("trace", logging.DEBUG),
            ("info", logging.INFO),
            ("warn", logging.WARNING),
            ("WARNING", logging.WARNING),
            ("error", logging.ERROR),
            ("fatal", logging.CRITICAL),
        ],
    )
    def test_known_names(self, name, expected):
        assert parse_log_level(name) == expected

    @pytest.mark.parametrize("name", ["", "verbose", "   "])
    def test_invalid_falls_back_to_info(self, name):
        assert parse_log_level(name) == logging.INFO

    def test_env_invalid_level_does_not_fail(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "shouting")

        settings = Settings(_env_file=None)

        assert settings.log_level == "info"
        assert settings.level == logging.INFO

    def test_env_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "Debug")

        assert Settings(_env_file=None).level == logging.DEBUG


class TestAddr:
    """Tests for ADDR handling."""

    def test_default(self, settings):
        assert settings.addr == ":8080"
        assert settings.host == "0.0.0.0"
        assert settings.port == 8080

    def test_empty_env_uses_default(self, monkeypatch):
        monkeypatch.setenv("ADDR", "")

        assert Settings(_env_file=None).addr == ":8080"

    def test_host_and_port(self, monkeypatch):
        monkeypatch.setenv("ADDR", "127.0.0.1:9000")

        settings = Settings(_env_file=None)

        assert settings.host == "127.0.0.1"
        assert settings.port == 9000

    def test_ipv6(self):
        assert split_addr("[::1]:8081") == ("::1", 8081)

    @pytest.mark.parametrize("addr", ["8080", "localhost:http", "host:99999"])
    def test_split_rejects_bad_addresses(self, addr):
        with pytest.raises(ValueError):
            split_addr(addr)

    def test_env_bad_addr_loads_unchecked(self, monkeypatch):
        monkeypatch.setenv("ADDR", "no-port")

        assert Settings(_env_file=None).addr == "no-port"


def test_shutdown_defaults(settings):
    assert settings.shutdown_grace_seconds == 5
    assert settings.idle_timeout_seconds == 60
