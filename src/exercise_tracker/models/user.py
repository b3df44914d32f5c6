"""User data model."""

from dataclasses import dataclass


@dataclass
class User:
    """A registered user. Usernames are unique."""

    id: str
    username: str

    def to_dict(self) -> dict:
        """Convert to the JSON response shape."""
        return {
            "id": self.id,
            "username": self.username,
        }
