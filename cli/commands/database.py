"""Database management commands."""

import asyncio

import typer

from src.core.database import close_database
from src.core.database import init_database


app = typer.Typer(no_args_is_help=True)


async def _init() -> None:
    try:
        await init_database()
    finally:
        await close_database()


@app.command("init")
def init_db() -> None:
    """Check connectivity and create missing tables (non-production only).

    Production schemas are managed with ``alembic upgrade head``.
    """
    asyncio.run(_init())
    typer.secho("Database initialized", fg=typer.colors.GREEN)
