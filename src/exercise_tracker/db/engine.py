"""Database connection pool and schema setup."""

import asyncio
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

import aiosqlite

logger = logging.getLogger(__name__)

CREATE_USERS_TABLE = """
    CREATE TABLE IF NOT EXISTS users (
        id TEXT PRIMARY KEY,
        username TEXT UNIQUE NOT NULL
    )
"""

CREATE_EXERCISES_TABLE = """
    CREATE TABLE IF NOT EXISTS exercises (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL REFERENCES users(id) ON DELETE CASCADE,
        description TEXT NOT NULL,
        duration INTEGER NOT NULL,
        date TEXT NOT NULL
    )
"""

CREATE_EXERCISES_INDEX = """
    CREATE INDEX IF NOT EXISTS idx_exercises_user_date
    ON exercises(user_id, date)
"""


class Database:
    """A bounded pool of aiosqlite connections to one database file.

    Created once per application and handed to whatever needs storage.
    Every pooled connection enforces foreign keys.
    """

    def __init__(self, path: Path | str, pool_size: int = 4, timeout: float = 5.0):
        if pool_size < 1:
            raise ValueError("pool_size must be at least 1")
        self.path = Path(path)
        self.pool_size = pool_size
        self.timeout = timeout
        self._pool: asyncio.Queue[aiosqlite.Connection] | None = None
        self._connections: list[aiosqlite.Connection] = []

    async def open(self) -> None:
        """Open all pooled connections."""
        if self._pool is not None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        pool: asyncio.Queue[aiosqlite.Connection] = asyncio.Queue()
        try:
            for _ in range(self.pool_size):
                conn = await aiosqlite.connect(self.path, timeout=self.timeout)
                self._connections.append(conn)
                conn.row_factory = aiosqlite.Row
                await conn.execute("PRAGMA foreign_keys = ON")
                pool.put_nowait(conn)
        except BaseException:
            await self._close_connections()
            raise
        self._pool = pool
        logger.info("Opened %d connection(s) to %s", self.pool_size, self.path)

    async def close(self) -> None:
        """Close all pooled connections."""
        if self._pool is None:
            return
        self._pool = None
        await self._close_connections()
        logger.info("Closed connections to %s", self.path)

    async def _close_connections(self) -> None:
        connections, self._connections = self._connections, []
        for conn in connections:
            await conn.close()

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[aiosqlite.Connection]:
        """Borrow a connection; commits on success, rolls back on error."""
        if self._pool is None:
            raise aiosqlite.OperationalError("Database is not open")
        pool = self._pool
        conn = await pool.get()
        try:
            yield conn
            await conn.commit()
        except BaseException:
            await conn.rollback()
            raise
        finally:
            pool.put_nowait(conn)


async def init_db(database: Database) -> None:
    """Create the users and exercises tables if they do not exist."""
    async with database.acquire() as db:
        await db.execute(CREATE_USERS_TABLE)
        logger.info("Users table created or already exists")

        await db.execute(CREATE_EXERCISES_TABLE)
        await db.execute(CREATE_EXERCISES_INDEX)
        logger.info("Exercises table created or already exists")


async def drop_all(database: Database) -> None:
    """Drop both tables, exercises first."""
    async with database.acquire() as db:
        await db.execute("DROP TABLE IF EXISTS exercises")
        await db.execute("DROP TABLE IF EXISTS users")


async def reset_all(database: Database) -> None:
    """Drop both tables and recreate the schema."""
    await drop_all(database)
    await init_db(database)
    logger.info("Database reset")


async def try_init_db(database: Database) -> bool:
    """Run init_db, logging instead of raising on failure.

    Returns:
        True if the schema was initialized
    """
    try:
        await init_db(database)
    except (aiosqlite.Error, OSError):
        logger.exception("Error creating tables")
        return False
    return True
