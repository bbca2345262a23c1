"""Errors raised by the concepts and translated to HTTP responses."""

from typing import Any

from fastapi import status


class ConceptError(Exception):
    """Base error for every failure a concept reports to its caller.

    The message may contain ``{0}``-style placeholders which are filled with
    the extra arguments.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, *args: Any):
        super().__init__(message.format(*args) if args else message)


class ValidationError(ConceptError):
    """A required value is missing or not one of the accepted values."""

    status_code = status.HTTP_400_BAD_REQUEST


class UnauthenticatedError(ConceptError):
    """The request has no logged in user."""

    status_code = status.HTTP_401_UNAUTHORIZED


class NotAllowedError(ConceptError):
    """The actor is not allowed to perform the action."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(ConceptError):
    """The referenced document does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ConsistencyError(ConceptError):
    """A later step of a cross-concept operation failed after an earlier one succeeded."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
