"""CLI commands for exercise-tracker."""

from .init import init
from .reset import reset
from .serve import serve
from .users import log, users

__all__ = [
    "init",
    "log",
    "reset",
    "serve",
    "users",
]
