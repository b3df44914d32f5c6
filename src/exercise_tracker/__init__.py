"""exercise-tracker: users, exercises and filtered exercise logs over HTTP."""

__version__ = "0.1.0"
