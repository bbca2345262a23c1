"""Thread API routes."""

import logging
from typing import List, Optional
from bson import ObjectId
from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_concepts, get_current_user, internal_error
from app.schemas.common import MessageResponse
from app.schemas.posts import PostResponse
from app.schemas.threads import (
    ThreadCreate,
    ThreadCreateResponse,
    ThreadDelete,
    ThreadResponse,
    ThreadTitleUpdate,
)
from app.services.concepts import Concepts
from app.services.responses import posts_response, thread_response, threads_response
from app.services.sync_service import delete_thread_cascade
from app.utils.errors import ConceptError
from app.utils.object_ids import parse_id_list, to_object_id

logger = logging.getLogger(__name__)
router = APIRouter(tags=["threads"])


@router.get("/threads", response_model=List[ThreadResponse])
async def get_threads_endpoint(
    member: Optional[str] = None,
    concepts: Concepts = Depends(get_concepts),
) -> List[ThreadResponse]:
    """Get all threads, or only those the given user id is a member of."""
    try:
        member_id = to_object_id(member) if member else None
        threads = await concepts.threading.get_threads(member_id)
        logger.info(f"Retrieved {len(threads)} threads")
        return await threads_response(concepts.authing, threads)
    except (HTTPException, ConceptError):
        raise
    except Exception as e:
        raise internal_error(logger, "get_threads_endpoint", e)


@router.post("/threads", response_model=ThreadCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_thread_endpoint(
    body: ThreadCreate,
    user: ObjectId = Depends(get_current_user),
    concepts: Concepts = Depends(get_concepts),
) -> ThreadCreateResponse:
    """Create a thread owned by the logged in user."""
    try:
        logger.info(f"Creating thread for user {user}")
        content = parse_id_list(body.threadContent)
        members = parse_id_list(body.members)
        thread = await concepts.threading.create_thread(user, body.title, content, members)
        return ThreadCreateResponse(
            msg="Thread successfully created!",
            thread=await thread_response(concepts.authing, thread),
        )
    except (HTTPException, ConceptError):
        raise
    except Exception as e:
        raise internal_error(logger, "create_thread_endpoint", e)


@router.delete("/threads", response_model=MessageResponse)
async def delete_thread_endpoint(
    body: ThreadDelete,
    user: ObjectId = Depends(get_current_user),
    concepts: Concepts = Depends(get_concepts),
) -> MessageResponse:
    """Delete a thread and all of its posts. Only the creator may do this."""
    try:
        thread_id = to_object_id(body.id)
        logger.info(f"User {user} deleting thread {thread_id}")
        result = await delete_thread_cascade(concepts.posting, concepts.threading, thread_id, user)
        return MessageResponse(**result)
    except (HTTPException, ConceptError):
        raise
    except Exception as e:
        raise internal_error(logger, "delete_thread_endpoint", e)


@router.patch("/threads/{id}", response_model=MessageResponse)
async def edit_thread_title_endpoint(
    id: str,
    body: ThreadTitleUpdate,
    user: ObjectId = Depends(get_current_user),
    concepts: Concepts = Depends(get_concepts),
) -> MessageResponse:
    try:
        thread_id = to_object_id(id)
        await concepts.threading.assert_creator_is_user(thread_id, user)
        result = await concepts.threading.edit_thread_title(thread_id, body.title)
        return MessageResponse(**result)
    except (HTTPException, ConceptError):
        raise
    except Exception as e:
        raise internal_error(logger, "edit_thread_title_endpoint", e)


@router.get("/threads/{id}", response_model=List[PostResponse])
async def get_thread_posts_endpoint(
    id: str,
    concepts: Concepts = Depends(get_concepts),
) -> List[PostResponse]:
    """Get every post of a thread in timeline order (not paginated)."""
    try:
        thread = await concepts.threading.get_thread_content(to_object_id(id))
        posts = await concepts.posting.get_many_posts_by_id(thread.content)
        logger.info(f"Retrieved {len(posts)} posts for thread {thread.id}")
        return await posts_response(concepts.authing, posts)
    except (HTTPException, ConceptError):
        raise
    except Exception as e:
        raise internal_error(logger, "get_thread_posts_endpoint", e)


@router.patch("/joinThreads/{id}", response_model=MessageResponse)
async def join_thread_endpoint(
    id: str,
    user: ObjectId = Depends(get_current_user),
    concepts: Concepts = Depends(get_concepts),
) -> MessageResponse:
    try:
        result = await concepts.threading.join_thread(to_object_id(id), user)
        return MessageResponse(**result)
    except (HTTPException, ConceptError):
        raise
    except Exception as e:
        raise internal_error(logger, "join_thread_endpoint", e)


@router.patch("/leaveThreads/{id}", response_model=MessageResponse)
async def leave_thread_endpoint(
    id: str,
    user: ObjectId = Depends(get_current_user),
    concepts: Concepts = Depends(get_concepts),
) -> MessageResponse:
    try:
        result = await concepts.threading.leave_thread(to_object_id(id), user)
        return MessageResponse(**result)
    except (HTTPException, ConceptError):
        raise
    except Exception as e:
        raise internal_error(logger, "leave_thread_endpoint", e)
