"""Utility helpers for exercise-tracker."""

from .dates import Clock, FixedClock, SystemClock, format_display_date, parse_date
from .object_id import generate_object_id, is_object_id

__all__ = [
    "Clock",
    "FixedClock",
    "format_display_date",
    "generate_object_id",
    "is_object_id",
    "parse_date",
    "SystemClock",
]
