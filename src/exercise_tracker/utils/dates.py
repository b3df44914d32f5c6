"""Date parsing, display formatting and the request clock."""

from datetime import date, datetime
from typing import Protocol

# Fixed English names so output never depends on the process locale
_WEEKDAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
_MONTHS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]


def format_display_date(value: date) -> str:
    """Render a date as e.g. ``Mon Jan 01 2024``."""
    return (
        f"{_WEEKDAYS[value.weekday()]} {_MONTHS[value.month - 1]} "
        f"{value.day:02d} {value.year:04d}"
    )


def parse_date(value: str) -> date:
    """Parse ``YYYY-MM-DD`` or a full ISO 8601 datetime into a date.

    Raises:
        ValueError: If the value is not a recognizable date
    """
    value = value.strip()
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value).date()


class Clock(Protocol):
    """Source of the current calendar date."""

    def today(self) -> date: ...


class SystemClock:
    """Clock backed by the server's local date."""

    def today(self) -> date:
        return date.today()


class FixedClock:
    """Clock that always reports the same date."""

    def __init__(self, fixed: date):
        self.fixed = fixed

    def today(self) -> date:
        return self.fixed
