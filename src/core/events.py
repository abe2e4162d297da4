"""Application lifespan events module.

This module provides lifespan management for startup and shutdown events.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .config import get_settings
from .database import close_database
from .database import init_database
from .logging_config import configure_logging


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan events.

    Handles startup and shutdown tasks:
    - Startup: Configure logging and connect to the database
    - Shutdown: Dispose of the database engine

    A database that cannot be reached at startup is fatal: the error is
    logged and re-raised so the server process exits without retrying.

    Args:
        app: FastAPI application instance.

    Yields:
        None after startup tasks complete.
    """
    settings = get_settings()

    # Startup
    configure_logging(settings.log_level)
    logger.info("Starting up application...")
    logger.info("Environment: %s", settings.environment)
    logger.info("JWT secret: %s", "Set" if settings.jwt_secret_configured else "Not set")

    # Initialize database
    try:
        await init_database()
        logger.info("Database connection initialized")
    except Exception as e:
        logger.critical(f"Failed to initialize database: {e}")
        raise

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")

    try:
        await close_database()
        logger.info("Database connection closed")
    except Exception as e:
        logger.error(f"Error closing database: {e}")

    logger.info("Application shutdown complete")
