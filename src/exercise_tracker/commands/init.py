"""Initialize database command."""

import click

from ..db.engine import init_db
from .base import async_command, echo_info, echo_success, get_cli_settings, open_database


@click.command()
@click.pass_context
@async_command
async def init(ctx: click.Context):
    """Create the database file and its tables.

    Safe to run more than once; existing data is kept.
    """
    settings = get_cli_settings(ctx)
    echo_info(f"Initializing database at {settings.DATABASE_PATH}")

    async with open_database(settings) as database:
        await init_db(database)

    echo_success("Database initialized")
