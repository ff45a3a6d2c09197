"""
Main entrypoint for the Message Board API.

This module assembles the FastAPI application: logging, the CORS
admission policy, JSON error handlers, the message store and the
routers.  ``create_app`` builds a fresh application (with its own,
empty message store) and is instantiated once at import time as
``app`` so it can be served directly::

    uvicorn message_board_api.app.main:app --port 3000
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.endpoints import health
from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.cors import OriginPolicy, PolicyCORSMiddleware
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .services.message_service import MessageService
from .services.message_store import MessageStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[MessageStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.
    store : Optional[MessageStore]
        Message store to serve.  A new empty store is created when
        omitted, so every application starts with an empty board.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.message_service = MessageService(store if store is not None else MessageStore())

    app.add_middleware(PolicyCORSMiddleware, policy=OriginPolicy.from_settings(settings))
    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api")
    app.include_router(health.router, tags=["health"])

    logger.debug(
        "Application created (environment=%s, trusted domains=%s)",
        settings.environment,
        ", ".join(settings.trusted_origin_domains) or "none",
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
