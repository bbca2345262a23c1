"""Post API routes."""

import logging
from typing import List, Optional
from bson import ObjectId
from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_concepts, get_current_user, internal_error
from app.schemas.common import MessageResponse
from app.schemas.posts import PostCreate, PostCreateResponse, PostResponse, PostUpdate
from app.services.concepts import Concepts
from app.services.responses import post_response, posts_response
from app.services.sync_service import create_post_in_thread, delete_post_from_thread
from app.utils.errors import ConceptError
from app.utils.object_ids import to_object_id

logger = logging.getLogger(__name__)
router = APIRouter(tags=["posts"])


@router.get("/posts", response_model=List[PostResponse])
async def get_posts_endpoint(
    author: Optional[str] = None,
    concepts: Concepts = Depends(get_concepts),
) -> List[PostResponse]:
    """Get all posts, or only those written by the user with the given username."""
    try:
        if author:
            user = await concepts.authing.get_user_by_username(author)
            posts = await concepts.posting.get_by_author(user.id)
        else:
            posts = await concepts.posting.get_posts()
        logger.info(f"Retrieved {len(posts)} posts")
        return await posts_response(concepts.authing, posts)
    except (HTTPException, ConceptError):
        raise
    except Exception as e:
        raise internal_error(logger, "get_posts_endpoint", e)


@router.post("/posts", response_model=PostCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_post_endpoint(
    body: PostCreate,
    user: ObjectId = Depends(get_current_user),
    concepts: Concepts = Depends(get_concepts),
) -> PostCreateResponse:
    """
    Create a post in a thread.

    The post is appended to the end of the thread's content. When
    REQUIRE_MEMBERSHIP_TO_POST is on, only members of the thread may post.
    """
    try:
        thread_id = to_object_id(body.id)
        logger.info(f"User {user} posting to thread {thread_id}")
        created = await create_post_in_thread(
            concepts.posting,
            concepts.threading,
            user,
            body.content,
            thread_id,
            body.options,
            require_membership=concepts.require_membership_to_post,
        )
        return PostCreateResponse(
            msg=created["msg"],
            post=await post_response(concepts.authing, created["post"]),
        )
    except (HTTPException, ConceptError):
        raise
    except Exception as e:
        raise internal_error(logger, "create_post_endpoint", e)


@router.patch("/posts/{id}", response_model=MessageResponse)
async def update_post_endpoint(
    id: str,
    body: PostUpdate,
    user: ObjectId = Depends(get_current_user),
    concepts: Concepts = Depends(get_concepts),
) -> MessageResponse:
    try:
        post_id = to_object_id(id)
        await concepts.posting.assert_author_is_user(post_id, user)
        result = await concepts.posting.update(post_id, body.content, body.options)
        return MessageResponse(**result)
    except (HTTPException, ConceptError):
        raise
    except Exception as e:
        raise internal_error(logger, "update_post_endpoint", e)


@router.delete("/posts/{id}", response_model=MessageResponse)
async def delete_post_endpoint(
    id: str,
    user: ObjectId = Depends(get_current_user),
    concepts: Concepts = Depends(get_concepts),
) -> MessageResponse:
    """Delete one of the logged in user's posts and remove it from its thread."""
    try:
        post_id = to_object_id(id)
        logger.info(f"User {user} deleting post {post_id}")
        result = await delete_post_from_thread(concepts.posting, concepts.threading, post_id, user)
        return MessageResponse(**result)
    except (HTTPException, ConceptError):
        raise
    except Exception as e:
        raise internal_error(logger, "delete_post_endpoint", e)
