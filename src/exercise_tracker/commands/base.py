"""Shared CLI utilities."""

import asyncio
from contextlib import asynccontextmanager
from functools import wraps
from typing import AsyncIterator

import click

from ..db.engine import Database
from ..settings import Settings


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def get_cli_settings(ctx: click.Context) -> Settings:
    """Get the settings loaded by the root command."""
    return ctx.find_root().obj["settings"]


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database file exists."""
    settings = get_cli_settings(ctx)
    if not settings.DATABASE_PATH.exists():
        echo_error(
            f"No database at {settings.DATABASE_PATH}. "
            "Run 'exercise-tracker init' first."
        )
        ctx.exit(1)


@asynccontextmanager
async def open_database(settings: Settings) -> AsyncIterator[Database]:
    """Open a single-connection database for a CLI command."""
    database = Database(settings.DATABASE_PATH, pool_size=1, timeout=settings.DATABASE_TIMEOUT)
    await database.open()
    try:
        yield database
    finally:
        await database.close()


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format rows as a plain-text table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers))]
    lines.append("".join("-" * w + " " * padding for w in widths))
    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row))
        )

    return "\n".join(line.rstrip() for line in lines)
