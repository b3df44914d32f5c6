"""User and exercise log routes."""

from datetime import date

from fastapi import APIRouter, Depends, Request

from ...db.repositories import ExerciseRepository, UserRepository
from ...errors import NotFoundError, ValidationError
from ...models.exercise import ExerciseLog
from ...utils.dates import Clock, parse_date
from ...utils.object_id import generate_object_id
from ..deps import (
    get_clock,
    get_exercise_repository,
    get_user_repository,
    optional_field,
    read_body,
)

router = APIRouter(prefix="/api/users", tags=["users"])


def _parse_date_param(value: str | None) -> date | None:
    if value is None:
        return None
    try:
        return parse_date(value)
    except ValueError:
        raise ValidationError("Invalid date")


def _parse_limit(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        limit = int(value)
    except ValueError:
        raise ValidationError("Limit must be a non-negative integer")
    if limit < 0:
        raise ValidationError("Limit must be a non-negative integer")
    return limit


@router.post("")
async def create_user(
    request: Request,
    users: UserRepository = Depends(get_user_repository),
):
    """Create a user, or return the existing one with that username."""
    body = await read_body(request)
    username = optional_field(body, "username")
    if username is None:
        raise ValidationError("Username is required")

    existing = await users.find_by_username(username)
    if existing:
        return existing.to_dict()

    user = await users.insert(generate_object_id(), username)
    return user.to_dict()


@router.get("")
async def list_users(users: UserRepository = Depends(get_user_repository)):
    """List all users ordered by username."""
    return [user.to_dict() for user in await users.list_all()]


@router.post("/{user_id}/exercises")
async def add_exercise(
    user_id: str,
    request: Request,
    users: UserRepository = Depends(get_user_repository),
    exercises: ExerciseRepository = Depends(get_exercise_repository),
    clock: Clock = Depends(get_clock),
):
    """Record an exercise for a user."""
    body = await read_body(request)
    description = optional_field(body, "description")
    duration_raw = optional_field(body, "duration")
    if description is None or duration_raw is None:
        raise ValidationError("Description and duration are required")

    try:
        duration = int(duration_raw)
    except ValueError:
        raise ValidationError("Duration must be a positive integer")
    if duration <= 0:
        raise ValidationError("Duration must be a positive integer")

    exercise_date = _parse_date_param(optional_field(body, "date")) or clock.today()

    user = await users.get(user_id)
    if user is None:
        raise NotFoundError("User not found")

    exercise = await exercises.insert(
        generate_object_id(), user.id, description, duration, exercise_date
    )
    return exercise.to_created_dict(user)


@router.get("/{user_id}/logs")
async def get_logs(
    user_id: str,
    request: Request,
    users: UserRepository = Depends(get_user_repository),
    exercises: ExerciseRepository = Depends(get_exercise_repository),
):
    """Get a user's exercise log, optionally filtered by date and limited."""
    params = request.query_params
    date_from = _parse_date_param(optional_field(params, "from"))
    date_to = _parse_date_param(optional_field(params, "to"))
    limit = _parse_limit(optional_field(params, "limit"))

    user = await users.get(user_id)
    if user is None:
        raise NotFoundError("User not found")

    entries = await exercises.list_for_user(
        user.id, date_from=date_from, date_to=date_to, limit=limit
    )
    return ExerciseLog(user=user, exercises=entries).to_dict()
