"""Data models for exercise-tracker."""

from .exercise import Exercise, ExerciseLog
from .user import User

__all__ = [
    "Exercise",
    "ExerciseLog",
    "User",
]
