"""Session API routes: login, logout and the current user."""

import logging
from bson import ObjectId
from fastapi import APIRouter, Depends, HTTPException, Request

from app.api.deps import get_concepts, get_current_user, internal_error
from app.schemas.common import MessageResponse
from app.schemas.users import LoginRequest, UserResponse
from app.services.concepts import Concepts
from app.services.responses import user_response
from app.utils.errors import ConceptError

logger = logging.getLogger(__name__)
router = APIRouter(tags=["sessions"])


@router.get("/session", response_model=UserResponse)
async def get_session_user_endpoint(
    user: ObjectId = Depends(get_current_user),
    concepts: Concepts = Depends(get_concepts),
) -> UserResponse:
    try:
        return user_response(await concepts.authing.get_user_by_id(user))
    except (HTTPException, ConceptError):
        raise
    except Exception as e:
        raise internal_error(logger, "get_session_user_endpoint", e)


@router.post("/login", response_model=MessageResponse)
async def login_endpoint(
    request: Request,
    body: LoginRequest,
    concepts: Concepts = Depends(get_concepts),
) -> MessageResponse:
    try:
        user = await concepts.authing.authenticate(body.username, body.password)
        concepts.sessioning.start(request.session, user.id)
        return MessageResponse(msg="Logged in!")
    except (HTTPException, ConceptError):
        raise
    except Exception as e:
        raise internal_error(logger, "login_endpoint", e)


@router.post("/logout", response_model=MessageResponse)
async def logout_endpoint(request: Request, concepts: Concepts = Depends(get_concepts)) -> MessageResponse:
    try:
        concepts.sessioning.end(request.session)
        return MessageResponse(msg="Logged out!")
    except (HTTPException, ConceptError):
        raise
    except Exception as e:
        raise internal_error(logger, "logout_endpoint", e)
