"""Maintenance routes."""

from fastapi import APIRouter, Depends

from ...db.engine import Database, reset_all
from ..deps import get_database

router = APIRouter(prefix="/api", tags=["admin"])


@router.get("/reset")
async def reset(database: Database = Depends(get_database)):
    """Drop and recreate all tables."""
    await reset_all(database)
    return {"message": "Database reset successfully"}
