"""Data access layer for exercise-tracker."""

import logging
from datetime import date

import aiosqlite

from ..models.exercise import Exercise
from ..models.user import User
from .engine import Database
from .query import LogQuery

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for users."""

    def __init__(self, database: Database):
        self.database = database

    async def find_by_username(self, username: str) -> User | None:
        """Get a user by username."""
        async with self.database.acquire() as db:
            async with db.execute(
                "SELECT id, username FROM users WHERE username = ?", (username,)
            ) as cursor:
                row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_user(row)

    async def get(self, user_id: str) -> User | None:
        """Get a user by ID."""
        async with self.database.acquire() as db:
            async with db.execute(
                "SELECT id, username FROM users WHERE id = ?", (user_id,)
            ) as cursor:
                row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_user(row)

    async def insert(self, user_id: str, username: str) -> User:
        """Insert a new user."""
        async with self.database.acquire() as db:
            await db.execute(
                "INSERT INTO users (id, username) VALUES (?, ?)", (user_id, username)
            )
        logger.info("Created user %s (%s)", username, user_id)
        return User(id=user_id, username=username)

    async def list_all(self) -> list[User]:
        """List all users ordered by username."""
        async with self.database.acquire() as db:
            async with db.execute("SELECT id, username FROM users ORDER BY username") as cursor:
                rows = await cursor.fetchall()
            return [self._row_to_user(row) for row in rows]

    def _row_to_user(self, row: aiosqlite.Row) -> User:
        return User(id=row["id"], username=row["username"])


class ExerciseRepository:
    """Repository for exercise entries."""

    def __init__(self, database: Database):
        self.database = database

    async def insert(
        self,
        exercise_id: str,
        user_id: str,
        description: str,
        duration: int,
        exercise_date: date,
    ) -> Exercise:
        """Insert an exercise entry for an existing user."""
        async with self.database.acquire() as db:
            await db.execute(
                """
                INSERT INTO exercises (id, user_id, description, duration, date)
                VALUES (?, ?, ?, ?, ?)
                """,
                (exercise_id, user_id, description, duration, exercise_date.isoformat()),
            )
        return Exercise(
            id=exercise_id,
            user_id=user_id,
            description=description,
            duration=duration,
            date=exercise_date,
        )

    async def list_for_user(
        self,
        user_id: str,
        date_from: date | None = None,
        date_to: date | None = None,
        limit: int | None = None,
    ) -> list[Exercise]:
        """List a user's exercises, oldest first."""
        sql, params = LogQuery(
            user_id=user_id, date_from=date_from, date_to=date_to, limit=limit
        ).build()
        async with self.database.acquire() as db:
            async with db.execute(sql, params) as cursor:
                rows = await cursor.fetchall()
            return [self._row_to_exercise(row) for row in rows]

    def _row_to_exercise(self, row: aiosqlite.Row) -> Exercise:
        return Exercise(
            id=row["id"],
            user_id=row["user_id"],
            description=row["description"],
            duration=row["duration"],
            date=date.fromisoformat(row["date"]),
        )
