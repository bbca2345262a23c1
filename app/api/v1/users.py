"""User API routes."""

import logging
from typing import List
from bson import ObjectId
from fastapi import APIRouter, Depends, HTTPException, Request, status

from app.api.deps import get_concepts, get_current_user, internal_error
from app.schemas.common import MessageResponse
from app.schemas.users import (
    PasswordUpdate,
    UserCreate,
    UserCreateResponse,
    UserResponse,
    UsernameUpdate,
)
from app.services.concepts import Concepts
from app.services.responses import user_response
from app.services.sync_service import delete_user_cascade
from app.utils.errors import ConceptError

logger = logging.getLogger(__name__)
router = APIRouter(tags=["users"])


@router.get("/users", response_model=List[UserResponse])
async def get_users_endpoint(concepts: Concepts = Depends(get_concepts)) -> List[UserResponse]:
    try:
        users = await concepts.authing.get_users()
        logger.info(f"Retrieved {len(users)} users")
        return [user_response(user) for user in users]
    except (HTTPException, ConceptError):
        raise
    except Exception as e:
        raise internal_error(logger, "get_users_endpoint", e)


@router.get("/users/{username}", response_model=UserResponse)
async def get_user_endpoint(username: str, concepts: Concepts = Depends(get_concepts)) -> UserResponse:
    try:
        return user_response(await concepts.authing.get_user_by_username(username))
    except (HTTPException, ConceptError):
        raise
    except Exception as e:
        raise internal_error(logger, "get_user_endpoint", e)


@router.post("/users", response_model=UserCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_user_endpoint(
    request: Request,
    body: UserCreate,
    concepts: Concepts = Depends(get_concepts),
) -> UserCreateResponse:
    """
    Sign up a new user.

    Profile responses, if given, are validated before the account is created
    so a bad answer never leaves a user without a profile.
    """
    try:
        concepts.sessioning.is_logged_out(request.session)
        if body.profileResponses:
            concepts.profiling.validate_choices(body.profileResponses)

        created = await concepts.authing.create(body.username, body.password)
        user = created["user"]

        if body.profileResponses:
            await concepts.profiling.ask(user.id, body.profileResponses)

        return UserCreateResponse(msg=created["msg"], user=user_response(user))
    except (HTTPException, ConceptError):
        raise
    except Exception as e:
        raise internal_error(logger, "create_user_endpoint", e)


@router.patch("/users/username", response_model=MessageResponse)
async def update_username_endpoint(
    body: UsernameUpdate,
    user: ObjectId = Depends(get_current_user),
    concepts: Concepts = Depends(get_concepts),
) -> MessageResponse:
    try:
        return MessageResponse(**await concepts.authing.update_username(user, body.username))
    except (HTTPException, ConceptError):
        raise
    except Exception as e:
        raise internal_error(logger, "update_username_endpoint", e)


@router.patch("/users/password", response_model=MessageResponse)
async def update_password_endpoint(
    body: PasswordUpdate,
    user: ObjectId = Depends(get_current_user),
    concepts: Concepts = Depends(get_concepts),
) -> MessageResponse:
    try:
        result = await concepts.authing.update_password(user, body.currentPassword, body.newPassword)
        return MessageResponse(**result)
    except (HTTPException, ConceptError):
        raise
    except Exception as e:
        raise internal_error(logger, "update_password_endpoint", e)


@router.delete("/users", response_model=MessageResponse)
async def delete_user_endpoint(
    request: Request,
    user: ObjectId = Depends(get_current_user),
    concepts: Concepts = Depends(get_concepts),
) -> MessageResponse:
    try:
        result = await delete_user_cascade(
            concepts.authing, concepts.sessioning, concepts.profiling, request.session, user
        )
        return MessageResponse(**result)
    except (HTTPException, ConceptError):
        raise
    except Exception as e:
        raise internal_error(logger, "delete_user_endpoint", e)
