"""Database layer for exercise-tracker."""

from .engine import Database, drop_all, init_db, reset_all, try_init_db
from .query import LogQuery
from .repositories import ExerciseRepository, UserRepository

__all__ = [
    "Database",
    "drop_all",
    "ExerciseRepository",
    "init_db",
    "LogQuery",
    "reset_all",
    "try_init_db",
    "UserRepository",
]
