"""Request dependencies and body parsing shared by the routers."""

import json

from fastapi import Depends, Request

from ..db.engine import Database
from ..db.repositories import ExerciseRepository, UserRepository
from ..errors import ValidationError
from ..utils.dates import Clock


def get_database(request: Request) -> Database:
    """Get the database pool from app state."""
    return request.app.state.database


def get_clock(request: Request) -> Clock:
    """Get the clock used for default exercise dates."""
    return request.app.state.clock


def get_user_repository(database: Database = Depends(get_database)) -> UserRepository:
    return UserRepository(database)


def get_exercise_repository(
    database: Database = Depends(get_database),
) -> ExerciseRepository:
    return ExerciseRepository(database)


async def read_body(request: Request) -> dict:
    """Read a JSON or form-encoded request body into a dict.

    A missing or unrecognized body reads as empty.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        raw = await request.body()
        if not raw:
            return {}
        try:
            data = json.loads(raw)
        except ValueError:
            raise ValidationError("Invalid JSON body")
        return data if isinstance(data, dict) else {}

    if content_type.startswith(
        ("application/x-www-form-urlencoded", "multipart/form-data")
    ):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    return {}


def optional_field(data: dict, name: str) -> str | None:
    """Get a field as a string exactly as sent; empty values count as missing."""
    value = data.get(name)
    if value is None or isinstance(value, (dict, list)):
        return None
    value = str(value)
    return value or None
