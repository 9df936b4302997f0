"""
log-service — Application Configuration
=======================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       normalizes them, and exposes a `Settings` object.
Who:   Built once by `log_service.server.serve()` and passed to the app factory.

Environment variables:
    LOG_LEVEL               severity threshold name; invalid or empty → info
    ADDR                    listen address (host:port, :port, [v6]:port); empty → :8080
    SHUTDOWN_GRACE_SECONDS  drain window for in-flight requests on shutdown
    IDLE_TIMEOUT_SECONDS    keep-alive idle timeout
"""

import logging
from typing import Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_ADDR = ":8080"

# Accepted LOG_LEVEL names → stdlib levels. trace has no stdlib counterpart
# and maps to DEBUG; panic maps with fatal to CRITICAL.
LOG_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "critical": logging.CRITICAL,
    "panic": logging.CRITICAL,
}


def parse_log_level(name: str) -> int:
    """Map a LOG_LEVEL name to a stdlib level; anything unknown falls back to INFO."""
    return LOG_LEVELS.get((name or "").strip().lower(), logging.INFO)


def split_addr(addr: str) -> Tuple[str, int]:
    """
    Split a listen address into (host, port).

    An empty host means "all interfaces" and becomes 0.0.0.0. Bracketed IPv6
    hosts are unwrapped. Raises ValueError when the port part is missing or
    not a number in 0-65535.
    """
    host, sep, port = addr.rpartition(":")
    if not sep:
        raise ValueError(f"missing port in address {addr!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    if not port.isdigit() or int(port) > 65535:
        raise ValueError(f"invalid port in address {addr!r}")
    return host or "0.0.0.0", int(port)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Unlike strict validation, bad LOG_LEVEL values never fail startup; they
    degrade to INFO. ADDR is only checked when the listen socket is bound,
    so a malformed address ends in the server's fatal "server error" record.
    """

    # ── Logging ───────────────────────────────────────────────────────────
    log_level: str = Field(default="info")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v) -> str:
        name = (v or "").strip().lower()
        return name if name in LOG_LEVELS else "info"

    # ── Server ────────────────────────────────────────────────────────────
    addr: str = Field(default=DEFAULT_ADDR)

    @field_validator("addr", mode="before")
    @classmethod
    def default_addr(cls, v) -> str:
        addr = (v or "").strip()
        return addr or DEFAULT_ADDR

    shutdown_grace_seconds: int = Field(default=5, ge=1)
    idle_timeout_seconds: int = Field(default=60, ge=1)

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @property
    def level(self) -> int:
        """Stdlib logging level for `log_level`."""
        return parse_log_level(self.log_level)

    @property
    def host(self) -> str:
        return split_addr(self.addr)[0]

    @property
    def port(self) -> int:
        return split_addr(self.addr)[1]
