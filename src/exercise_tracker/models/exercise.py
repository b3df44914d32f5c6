"""Exercise and exercise log models."""

from dataclasses import dataclass, field
from datetime import date

from ..utils.dates import format_display_date
from .user import User


@dataclass
class Exercise:
    """A single exercise entry recorded against a user."""

    id: str
    user_id: str
    description: str
    duration: int  # minutes
    date: date

    @property
    def display_date(self) -> str:
        return format_display_date(self.date)

    def to_log_entry(self) -> dict:
        """Convert to a log entry (no identifiers)."""
        return {
            "description": self.description,
            "duration": self.duration,
            "date": self.display_date,
        }

    def to_created_dict(self, user: User) -> dict:
        """Response shape for a newly added exercise.

        The ``id`` field is the owning user's id, not the exercise id.
        """
        return {
            "id": user.id,
            "username": user.username,
            "date": self.display_date,
            "duration": self.duration,
            "description": self.description,
        }


@dataclass
class ExerciseLog:
    """A user's filtered and ordered exercises."""

    user: User
    exercises: list[Exercise] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.exercises)

    def to_dict(self) -> dict:
        """Convert to the JSON response shape."""
        return {
            "id": self.user.id,
            "username": self.user.username,
            "count": self.count,
            "log": [exercise.to_log_entry() for exercise in self.exercises],
        }
