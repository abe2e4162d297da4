"""Database module.

This module provides async SQLAlchemy engine and session factory
for the credential store.
"""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.core.config import get_settings
from src.utilities.enums import Environment

settings = get_settings()


def _engine_options(url: str) -> dict[str, Any]:
    """Pool and client timeout options for the configured backend."""
    if url.startswith("sqlite"):
        return {}

    return {
        "pool_pre_ping": True,  # Verify connections before using
        "pool_size": 10,
        "max_overflow": 20,
        # asyncpg: 5s to connect, 45s per statement
        "connect_args": {"timeout": 5, "command_timeout": 45},
    }


# Create async engine
engine = create_async_engine(
    settings.database_url,
    echo=False,
    future=True,
    **_engine_options(settings.database_url),
)

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def init_database() -> None:
    """Initialize database connection (called on startup).

    Raises whatever the driver raises when the database is unreachable;
    the lifespan handler lets that abort startup.
    """
    from src.abstract.entity import Entity
    from src.domains import customers  # noqa: F401
    from src.domains import employees  # noqa: F401

    async with engine.begin() as conn:
        await conn.execute(text("SELECT 1"))
        # In production the schema is owned by Alembic migrations
        if settings.environment != Environment.PRODUCTION:
            await conn.run_sync(Entity.metadata.create_all)


async def close_database() -> None:
    """Close database connection (called on shutdown)"""
    await engine.dispose()


async def ping_database() -> bool:
    """Return True if the database answers a trivial query."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError):
        return False
    return True


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide async database session for dependency injection.

    Yields:
        AsyncSession instance that auto-closes after use.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
