"""
Domain errors raised by the service layer.

Each error carries a human-readable message and the HTTP status the API
layer answers with. The mapping to a JSON response lives in
``growth_tracker.main``.
"""
from fastapi import status


class GrowthTrackerError(Exception):
    """Base class for every rejected operation."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(GrowthTrackerError):
    """A referenced user, goal, session or integration does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class Conflict(GrowthTrackerError):
    """Duplicate record or a relationship that would break the hierarchy."""

    status_code = status.HTTP_409_CONFLICT


class Forbidden(GrowthTrackerError):
    """The acting user lacks the role or relationship required."""

    status_code = status.HTTP_403_FORBIDDEN


class InvalidState(GrowthTrackerError):
    """The record is not in the status the transition requires."""

    status_code = status.HTTP_409_CONFLICT


class InvalidInput(GrowthTrackerError):
    """Well-formed input that violates a domain rule."""

    status_code = status.HTTP_400_BAD_REQUEST
