"""Entry point for the Message Board API.

Starts the FastAPI application under Uvicorn.  Host, port, log level
and the environment flag are read from environment variables (see
``message_board_api.app.core.config``); a ``PORT`` of ``3000`` is used
when none is given.

Usage:
    python run.py
"""
import asyncio
import logging
import sys

from fastapi import FastAPI
from uvicorn import Config, Server

from message_board_api.app.core.config import Settings, settings
from message_board_api.app.core.logging_config import resolve_log_level, setup_logging
from message_board_api.app.main import app

logger = logging.getLogger("run")


class MessageBoardServer(Server):
    """Uvicorn server that announces itself once the socket is bound."""

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            logger.info("Server running on port %s", self.config.port)


def build_server_config(settings: Settings, app: FastAPI) -> Config:
    """Uvicorn ``Config`` for ``app``; logging stays with ``setup_logging``."""
    return Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=resolve_log_level(settings.log_level),
        log_config=None,
    )


async def run_api() -> None:
    """Serve the API until interrupted.

    Uvicorn exits the process with status 1 when it cannot bind the
    listening socket (for example when the port is already in use).
    """
    server = MessageBoardServer(build_server_config(settings, app))
    logger.debug("Binding %s:%s (%s)", settings.host, settings.port, settings.environment)
    await server.serve()


def main() -> None:
    setup_logging(settings.log_level, settings.log_file)
    try:
        asyncio.run(run_api())
    except OSError as exc:
        logger.critical("Could not start server on %s:%s: %s", settings.host, settings.port, exc)
        sys.exit(1)
    except SystemExit as exc:
        if exc.code:
            logger.critical("Server on %s:%s failed to start", settings.host, settings.port)
        raise


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pass
