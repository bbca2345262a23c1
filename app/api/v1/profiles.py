"""Profile API routes."""

import logging
from bson import ObjectId
from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_concepts, get_current_user, internal_error
from app.schemas.common import MessageResponse
from app.schemas.profiles import ProfileQuestionResponse, ProfileResponse, ProfileUpdate
from app.services.concepts import Concepts
from app.utils.errors import ConceptError

logger = logging.getLogger(__name__)
router = APIRouter(tags=["profiles"])


@router.get("/profile/question", response_model=ProfileQuestionResponse)
async def get_profile_question_endpoint(concepts: Concepts = Depends(get_concepts)) -> ProfileQuestionResponse:
    """Get the profiling question and the answers it accepts."""
    question = concepts.profiling.question
    return ProfileQuestionResponse(question=question.question, options=list(question.options))


@router.get("/profile", response_model=ProfileResponse)
async def get_profile_endpoint(
    user: ObjectId = Depends(get_current_user),
    concepts: Concepts = Depends(get_concepts),
) -> ProfileResponse:
    try:
        choices = await concepts.profiling.get_user_responses(user)
        return ProfileResponse(question=concepts.profiling.question.question, selectedChoices=choices)
    except (HTTPException, ConceptError):
        raise
    except Exception as e:
        raise internal_error(logger, "get_profile_endpoint", e)


@router.patch("/profile", response_model=MessageResponse)
async def update_profile_endpoint(
    body: ProfileUpdate,
    user: ObjectId = Depends(get_current_user),
    concepts: Concepts = Depends(get_concepts),
) -> MessageResponse:
    """Replace the logged in user's answers to the profiling question."""
    try:
        concepts.profiling.validate_choices(body.selectedChoices)
        await concepts.profiling.update_profile(user, body.selectedChoices)
        return MessageResponse(msg="Profile updated successfully!")
    except (HTTPException, ConceptError):
        raise
    except Exception as e:
        raise internal_error(logger, "update_profile_endpoint", e)
