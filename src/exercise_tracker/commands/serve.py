"""Web server command."""

import click

from .base import get_cli_settings


@click.command()
@click.option("--host", default=None, help="Host to bind to (default: HOST setting)")
@click.option("--port", "-p", default=None, type=int, help="Port to bind to (default: PORT setting)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None, reload: bool):
    """Start the web server.

    Examples:

        # Start on the configured port (3000 unless PORT is set)
        exercise-tracker serve

        # Expose to network (all interfaces)
        exercise-tracker serve --host 0.0.0.0 --port 8080

        # Development mode with auto-reload
        exercise-tracker serve --reload
    """
    import uvicorn

    from ..web import create_app

    settings = get_cli_settings(ctx)
    host = host or settings.HOST
    port = port or settings.PORT

    click.echo()
    click.echo(click.style("Starting exercise-tracker web server...", fg="green"))
    click.echo(f"  Local:   http://{host}:{port}")
    click.echo()

    uvicorn.run(
        create_app(settings) if not reload else "exercise_tracker.web:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=reload,
        log_level=settings.LOG_LEVEL.lower(),
    )
