"""CLI entry point for exercise-tracker."""

import click

from . import __version__
from .commands import init, log, reset, serve, users
from .logging_utils import configure_logging
from .settings import get_settings


@click.group()
@click.version_option(version=__version__, prog_name="exercise-tracker")
@click.pass_context
def main(ctx: click.Context):
    """exercise-tracker: record exercises and query exercise logs.

    Settings come from the environment (DATABASE_PATH, HOST, PORT, LOG_LEVEL)
    or a .env file.

    Example usage:

        # Create the database
        exercise-tracker init

        # Run the HTTP API
        exercise-tracker serve --port 3000

        # Inspect data
        exercise-tracker users
        exercise-tracker log <user-id> --from 2024-01-01
    """
    if ctx.obj is None:
        ctx.obj = {}
    if "settings" not in ctx.obj:
        ctx.obj["settings"] = get_settings()
    configure_logging(ctx.obj["settings"].LOG_LEVEL)


main.add_command(init)
main.add_command(serve)
main.add_command(reset)
main.add_command(users)
main.add_command(log)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
