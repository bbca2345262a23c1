"""Dependencies shared by the API routes."""

import logging

from bson import ObjectId
from fastapi import Depends, HTTPException, Request, status

from app.services.concepts import Concepts
from app.utils.errors import NotFoundError, UnauthenticatedError


def get_concepts(request: Request) -> Concepts:
    """Get the concepts created at application startup."""
    return request.app.state.concepts


async def get_current_user(request: Request, concepts: Concepts = Depends(get_concepts)) -> ObjectId:
    """Get the logged in user, failing with 401 when there is none.

    A session whose account was deleted meanwhile is ended.
    """
    user = concepts.sessioning.get_user(request.session)
    try:
        await concepts.authing.get_user_by_id(user)
    except NotFoundError:
        concepts.sessioning.end(request.session)
        raise UnauthenticatedError("Must be logged in!")
    return user


def internal_error(logger: logging.Logger, endpoint: str, e: Exception) -> HTTPException:
    """Log an unexpected failure and build the 500 response for it."""
    logger.error(f"Unexpected error in {endpoint}: {str(e)}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Internal server error: {str(e)}"
    )
