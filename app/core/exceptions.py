"""
Domain error taxonomy.

Services raise these; the handlers registered in :mod:`app.main`
translate them to ``{"message": ...}`` JSON responses.
"""

from fastapi import status

from app.core.config import settings


class DomainError(Exception):
    """Base class for expected, caller-recoverable failures."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidArgument(DomainError):
    """Malformed, missing or out-of-range input."""

    status_code = status.HTTP_400_BAD_REQUEST


class MissingInterval(InvalidArgument):
    """Interval query without start or end.

    Existing clients expect 401 here, so the status is configurable.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.status_code = settings.INTERVAL_MISSING_FIELDS_STATUS


class Forbidden(DomainError):
    """Caller is not allowed to act (blocked account)."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFound(DomainError):
    """A referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class Conflict(DomainError):
    """Business-rule violation, e.g. a trainer reviewing their own plan."""

    status_code = status.HTTP_409_CONFLICT


class ServiceUnavailable(DomainError):
    """A collaborator (user store) failed or timed out."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
