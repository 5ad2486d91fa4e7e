"""
Error taxonomy for the user resource.

Services raise these exceptions; the HTTP layer translates each one
into a status code at the handler boundary.  Nothing here is retried.
"""

from fastapi import status


class UserApiError(Exception):
    """Base class for every error the user API reports to clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = "Internal server error"

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or self.detail)
        if detail:
            self.detail = detail


class InvalidIdentifier(UserApiError):
    """The path identifier is not a well‑formed store identifier."""

    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid user id"


class UserNotFound(UserApiError):
    """No stored user has the requested identifier."""

    status_code = status.HTTP_404_NOT_FOUND
    detail = "User not found"


class UniquenessViolation(UserApiError):
    """A write would duplicate a ``username`` already in the store."""

    status_code = status.HTTP_409_CONFLICT
    detail = "Username already exists"


class StoreUnavailable(UserApiError):
    """The document store could not be reached or the call failed."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "User store unavailable"
