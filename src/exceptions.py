"""Application exception hierarchy.

Every exception raised on purpose by the application derives from
``BaseAppException``. The exception handler registered in ``src.main``
renders them as ``{"message": ..., **extras}`` with the matching status code.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import status


logger = logging.getLogger(__name__)


class BaseAppException(Exception):
    """Base class for all application exceptions.

    Attributes:
        message: Client-facing message.
        status_code: HTTP status code used when rendering the response.
    """

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_content(self) -> dict[str, Any]:
        """Build the JSON body for this exception."""
        return {"message": self.message}


class BadRequestException(BaseAppException):
    """A required field is missing or a single field is malformed."""


class ValidationException(BaseAppException):
    """Malformed or missing request fields, itemized per field."""

    default_message = "Validation failed"

    def __init__(self, errors: list[str], message: str | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors)

    def to_content(self) -> dict[str, Any]:
        return {"message": self.message, "errors": self.errors}


class ConflictException(BaseAppException):
    """A unique field collides with an existing record."""

    default_message = "Record already exists"


class InvalidCredentialsException(BaseAppException):
    """Unknown identity or wrong password."""

    default_message = "Invalid credentials"


class InvalidTokenException(BaseAppException):
    """Token is malformed, tampered with, or of the wrong type."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid token"


class ExpiredTokenException(InvalidTokenException):
    """Token signature is valid but its expiry has passed."""

    default_message = "Token has expired"


class InternalFaultException(BaseAppException):
    """Store or signing failure surfaced to the client as a 500.

    The underlying fault message is exposed under ``error``.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None, error: str | None = None) -> None:
        super().__init__(message)
        self.error = error

    def to_content(self) -> dict[str, Any]:
        return {"message": self.message, "error": self.error}


@asynccontextmanager
async def fault_boundary(message: str) -> AsyncIterator[None]:
    """Translate unexpected faults inside a handler into ``InternalFaultException``.

    Application exceptions pass through untouched so their own status codes
    and messages reach the client.

    Args:
        message: Client-facing message for the 500 response.

    Example:
        async with fault_boundary("Error during login"):
            return await customer_service.login(request)
    """
    try:
        yield
    except BaseAppException:
        raise
    except Exception as exc:
        logger.exception("%s: %s", message, exc)
        raise InternalFaultException(message, error=str(exc)) from exc
