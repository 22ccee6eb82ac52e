"""Application lifespan management."""

import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from film_views import __version__
from film_views.logging_config import get_logger, log_with_context
from film_views.store import build_default_store

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events.

    The film store is built once here and lives on ``app.state`` until
    shutdown. Exceptions after yield are logged and re-raised.
    """
    app.state.startup_time = time.time()

    log_with_context(
        logger,
        "info",
        "Starting Film Views application",
        version=__version__,
        event_type="app_startup",
    )

    # Store in app state instead of global variable
    app.state.film_store = build_default_store()

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down Film Views application",
            uptime_seconds=int(time.time() - app.state.startup_time),
            event_type="app_shutdown",
        )
        app.state.film_store = None
