"""FastAPI application for exercise-tracker."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

import aiosqlite
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from .. import __version__
from ..db.engine import Database, try_init_db
from ..errors import TrackerError
from ..settings import Settings, get_settings
from ..utils.dates import Clock, SystemClock
from .routers import admin, users

logger = logging.getLogger(__name__)

VIEWS_DIR = Path(__file__).parent / "views"
PUBLIC_DIR = Path(__file__).parent / "public"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database and ensure the schema on startup; close on shutdown."""
    settings: Settings = app.state.settings
    database = Database(
        settings.DATABASE_PATH,
        pool_size=settings.DATABASE_POOL_SIZE,
        timeout=settings.DATABASE_TIMEOUT,
    )
    app.state.database = database

    # Startup failures are logged; requests then fail with 500
    try:
        await database.open()
    except (aiosqlite.Error, OSError):
        logger.exception("Database connection error")
    else:
        await try_init_db(database)

    yield

    await database.close()


async def tracker_error_handler(request: Request, exc: TrackerError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def server_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Error handling %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(status_code=500, content={"error": "Server error"})


async def catch_server_errors(request: Request, call_next):
    """Turn any unhandled exception into the generic 500 response."""
    try:
        return await call_next(request)
    except Exception as exc:
        return await server_error_handler(request, exc)


def create_app(settings: Settings | None = None, clock: Clock | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="exercise-tracker",
        description="Exercise tracking API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings or get_settings()
    app.state.clock = clock or SystemClock()

    # Added first so CORSMiddleware stays outermost
    app.middleware("http")(catch_server_errors)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app.state.settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TrackerError, tracker_error_handler)
    app.add_exception_handler(aiosqlite.Error, server_error_handler)

    if PUBLIC_DIR.exists():
        app.mount("/public", StaticFiles(directory=PUBLIC_DIR), name="public")

    app.include_router(users.router)
    app.include_router(admin.router)

    @app.get("/", include_in_schema=False)
    async def root():
        """Serve the landing page."""
        return FileResponse(VIEWS_DIR / "index.html")

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
