"""User listing and exercise log commands."""

import click

from ..db.repositories import ExerciseRepository, UserRepository
from ..models.exercise import ExerciseLog
from ..utils.dates import parse_date
from ..utils.object_id import is_object_id
from .base import (
    async_command,
    echo_error,
    echo_info,
    ensure_initialized,
    format_table,
    get_cli_settings,
    open_database,
)


def _date_option(ctx, param, value):
    if value is None:
        return None
    try:
        return parse_date(value)
    except ValueError:
        raise click.BadParameter("expected a date like 2024-01-31")


@click.command()
@click.pass_context
@async_command
async def users(ctx: click.Context):
    """List registered users."""
    ensure_initialized(ctx)

    async with open_database(get_cli_settings(ctx)) as database:
        all_users = await UserRepository(database).list_all()

    if not all_users:
        echo_info("No users yet")
        return

    click.echo(format_table(["ID", "Username"], [[u.id, u.username] for u in all_users]))


@click.command()
@click.argument("user_id")
@click.option("--from", "date_from", callback=_date_option, help="Earliest date (inclusive)")
@click.option("--to", "date_to", callback=_date_option, help="Latest date (inclusive)")
@click.option("--limit", type=click.IntRange(min=0), help="Maximum number of entries")
@click.pass_context
@async_command
async def log(ctx: click.Context, user_id: str, date_from, date_to, limit: int | None):
    """Show a user's exercise log.

    Examples:

        exercise-tracker log 65a1b2c3d4e5f60718293a4b

        exercise-tracker log 65a1b2c3d4e5f60718293a4b --from 2024-01-01 --limit 5
    """
    ensure_initialized(ctx)
    if not is_object_id(user_id):
        echo_error(f"{user_id} is not a valid user id")
        ctx.exit(1)

    async with open_database(get_cli_settings(ctx)) as database:
        user = await UserRepository(database).get(user_id)
        if user is None:
            echo_error(f"User {user_id} not found")
            ctx.exit(1)
        entries = await ExerciseRepository(database).list_for_user(
            user.id, date_from=date_from, date_to=date_to, limit=limit
        )

    exercise_log = ExerciseLog(user=user, exercises=entries)
    click.echo(f"{user.username} ({user.id}): {exercise_log.count} exercise(s)")
    if entries:
        click.echo()
        rows = [[e.display_date, str(e.duration), e.description] for e in entries]
        click.echo(format_table(["Date", "Minutes", "Description"], rows))
