"""
Authentication errors and their HTTP rendering.

Exception hierarchy:
    AuthError (base)
    ├── UserNotFoundError        404
    ├── InvalidCredentialsError  403
    ├── InvalidPasswordError     400
    ├── NotAuthenticatedError    401
    └── InvalidTokenError        403
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
import logging

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """
    Base exception for credential and token failures.

    Attributes:
        message: Short human-readable message returned to the client
        status_code: HTTP status the error maps to
    """
    message = "Authentication failed"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"message": self.message}


class UserNotFoundError(AuthError):
    """No record with the given username."""
    message = "User not found!"
    status_code = status.HTTP_404_NOT_FOUND


class InvalidCredentialsError(AuthError):
    """Password did not match the stored hash."""
    message = "Invalid credentials!"
    status_code = status.HTTP_403_FORBIDDEN


class InvalidPasswordError(AuthError):
    """Password cannot be hashed, e.g. it contains a NUL byte."""
    message = "Invalid password!"
    status_code = status.HTTP_400_BAD_REQUEST


class NotAuthenticatedError(AuthError):
    """No bearer token presented."""
    message = "Access token required!"
    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidTokenError(AuthError):
    """Token signature, format or expiry check failed."""
    message = "Invalid or expired token!"
    status_code = status.HTTP_403_FORBIDDEN


async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    """
    Render an AuthError as ``{"message": ...}`` with its mapped status.
    """
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")

    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
        headers=headers
    )
