"""Error types surfaced to HTTP callers."""


class TrackerError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TrackerError):
    """A required field is missing or malformed."""

    status_code = 400


class NotFoundError(TrackerError):
    """The referenced user does not exist."""

    status_code = 404
