# gamevault/errors.py

from fastapi import status


class AppError(Exception):
    """Base error; converted to a JSON `{"message": ...}` body at the route boundary."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Unexpected error"

    def __init__(self, message: str | None = None, status_code: int | None = None):
        super().__init__(message or self.message)
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class AuthenticationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid token"


class PersistenceError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Database error"


class UpstreamError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Game API error"


class UnexpectedError(AppError):
    pass
