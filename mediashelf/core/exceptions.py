# ============================================================================
# FILE: mediashelf/core/exceptions.py
# ============================================================================
from fastapi import status


class AppError(Exception):
    """Base class for errors that map onto a user-facing HTTP response"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Server error"

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class AlreadyExistsError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Username already registered"


class UserNotFoundError(AppError):
    # Login answers 400 for an unknown user, same as for a bad password
    status_code = status.HTTP_400_BAD_REQUEST
    message = "User not found"


class InvalidCredentialsError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid credentials"


class UnauthenticatedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Authentication required"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Playlist not found"


class DuplicateItemError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Item already in playlist"


class InternalError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Server error"
