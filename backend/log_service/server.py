"""
log-service — Server Runner
===========================

What:  Binds the listen socket, runs uvicorn, and drains on shutdown.
How:   uvicorn's signal handling (SIGINT/SIGTERM) calls handle_exit(), which
       sets `should_exit`; the serve loop observes that flag, stops accepting
       connections and gives in-flight requests `shutdown_grace_seconds`
       before closing what is left.

Lifecycle:
    Startup:
    1. Load Settings from the environment
    2. Build the console logger
    3. Bind the socket (fatal record + exit 1 on failure)
    4. Log "starting http server"

    Shutdown:
    1. Log "shutting down..." on the first termination signal
    2. Stop accepting, drain for up to the grace period
    3. Log "bye"
"""

import contextlib
import logging
import signal
import socket
import threading
from typing import Optional

import uvicorn

from log_service.config import Settings, split_addr
from log_service.exceptions import ServerStartupError
from log_service.logger import build_logger
from log_service.main import create_app

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class GracefulServer(uvicorn.Server):
    """uvicorn.Server that reports the start of shutdown to the service logger."""

    def __init__(self, config: uvicorn.Config, logger: logging.Logger):
        super().__init__(config)
        self.logger = logger

    def handle_exit(self, sig, frame) -> None:
        if not self.should_exit:
            self.logger.info("shutting down...", extra={"component": "server"})
        super().handle_exit(sig, frame)

    @contextlib.contextmanager
    def capture_signals(self):
        """
        Route SIGINT/SIGTERM to handle_exit for the lifetime of the server.

        The signals are not re-raised afterwards, so a drained server returns
        normally and the process exits with status 0.
        """
        if threading.current_thread() is not threading.main_thread():
            yield
            return
        original_handlers = {
            sig: signal.signal(sig, self.handle_exit) for sig in SHUTDOWN_SIGNALS
        }
        try:
            yield
        finally:
            for sig, handler in original_handlers.items():
                signal.signal(sig, handler)


def bind_socket(settings: Settings) -> socket.socket:
    """Open the listening socket for `settings.addr`, or raise ServerStartupError."""
    try:
        host, port = split_addr(settings.addr)
    except ValueError as exc:
        raise ServerStartupError(settings.addr, str(exc)) from exc
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    try:
        sock = socket.create_server((host, port), family=family, reuse_port=False)
    except OSError as exc:
        raise ServerStartupError(settings.addr, str(exc)) from exc
    sock.set_inheritable(True)
    return sock


def build_server(settings: Settings, logger: logging.Logger) -> GracefulServer:
    config = uvicorn.Config(
        create_app(settings, logger),
        timeout_graceful_shutdown=settings.shutdown_grace_seconds,
        timeout_keep_alive=settings.idle_timeout_seconds,
        access_log=False,
        log_config=None,
        lifespan="off",
    )
    return GracefulServer(config, logger)


def serve(settings: Optional[Settings] = None) -> None:
    """
    Run the service until a termination signal arrives.

    Raises:
        SystemExit(1): the listen address could not be bound.
    """
    settings = settings or Settings()
    logger = build_logger(settings.level)

    try:
        sock = bind_socket(settings)
    except ServerStartupError as exc:
        logger.critical("server error", extra={"component": "server", **exc.context})
        raise SystemExit(1) from exc

    server = build_server(settings, logger)
    logger.info("starting http server", extra={"component": "server", "addr": settings.addr})
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()
    logger.info("bye", extra={"component": "server"})
