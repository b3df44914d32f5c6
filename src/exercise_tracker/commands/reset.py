"""Reset database command."""

import click

from ..db.engine import reset_all
from .base import (
    async_command,
    echo_success,
    ensure_initialized,
    get_cli_settings,
    open_database,
)


@click.command()
@click.option("--yes", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
@async_command
async def reset(ctx: click.Context, yes: bool):
    """Delete all users and exercises."""
    ensure_initialized(ctx)
    if not yes:
        click.confirm("This deletes every user and exercise. Continue?", abort=True)

    async with open_database(get_cli_settings(ctx)) as database:
        await reset_all(database)

    echo_success("Database reset successfully")
