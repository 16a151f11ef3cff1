#!/usr/bin/env python3
"""Process entrypoint: read settings once, then serve until signalled."""

from __future__ import annotations

import logging
import socket

import uvicorn
from pydantic import ValidationError

from greeter.config import Settings
from greeter.constants import HOST
from greeter.main import create_app
from greeter.observability.logging import configure_logging
from greeter.observability.metrics import start_metrics_server

logger = logging.getLogger(__name__)

BIND_ERROR_EXIT_CODE = 1
CONFIG_ERROR_EXIT_CODE = 2


class GreeterServer(uvicorn.Server):
    """uvicorn server that announces its address once the listener is bound."""

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        # A failed bind exits inside super().startup(), so nothing is logged.
        await super().startup(sockets=sockets)
        if self.started:
            logger.info("Running on http://%s:%s", HOST, self.bound_port)

    @property
    def bound_port(self) -> int:
        """Port of the live listener; differs from the config when it is 0."""
        for server in getattr(self, "servers", []):
            for sock in server.sockets:
                return sock.getsockname()[1]
        return self.config.port


def build_server(settings: Settings) -> GreeterServer:
    config = uvicorn.Config(
        create_app(settings),
        host=HOST,
        port=settings.port,
        access_log=False,
        # configure_logging owns the uvicorn loggers
        log_config=None,
    )
    return GreeterServer(config)


def load_settings() -> Settings:
    """Build settings or exit; a bad port never falls back to the default."""
    try:
        return Settings()
    except ValidationError as exc:
        configure_logging()
        logger.critical("Invalid configuration: %s", exc)
        raise SystemExit(CONFIG_ERROR_EXIT_CODE) from exc


def serve(server: uvicorn.Server) -> None:
    """Run until signalled; any failed startup exits with BIND_ERROR_EXIT_CODE."""
    try:
        server.run()
    except SystemExit as exc:
        if exc.code:
            raise SystemExit(BIND_ERROR_EXIT_CODE) from exc
        raise


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)
    if settings.metrics_port is not None:
        start_metrics_server(settings.metrics_port)
    serve(build_server(settings))


if __name__ == "__main__":
    main()
