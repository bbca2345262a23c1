"""Turn stored documents into API responses, resolving user ids to usernames."""

from typing import Dict, List

from bson import ObjectId

from app.models.post import Post
from app.models.thread import Thread
from app.models.user import User
from app.schemas.posts import PostResponse
from app.schemas.threads import ThreadResponse
from app.schemas.users import UserResponse
from app.services.authing_service import AuthingService
from app.utils.object_ids import stringify_ids


async def _usernames(authing: AuthingService, ids: List[ObjectId]) -> Dict[ObjectId, str]:
    usernames: Dict[ObjectId, str] = {}
    for _id in dict.fromkeys(ids):
        usernames[_id] = await authing.id_to_username(_id)
    return usernames


def user_response(user: User) -> UserResponse:
    return UserResponse(_id=str(user.id), username=user.username, created_at=user.created_at)


async def post_response(authing: AuthingService, post: Post) -> PostResponse:
    return (await posts_response(authing, [post]))[0]


async def posts_response(authing: AuthingService, posts: List[Post]) -> List[PostResponse]:
    usernames = await _usernames(authing, [post.author for post in posts])
    return [
        PostResponse(
            _id=str(post.id),
            author=usernames[post.author],
            content=post.content,
            thread=str(post.thread),
            options=post.options,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
        for post in posts
    ]


async def thread_response(authing: AuthingService, thread: Thread) -> ThreadResponse:
    return (await threads_response(authing, [thread]))[0]


async def threads_response(authing: AuthingService, threads: List[Thread]) -> List[ThreadResponse]:
    usernames = await _usernames(authing, [thread.creator for thread in threads])
    return [
        ThreadResponse(
            _id=str(thread.id),
            creator=usernames[thread.creator],
            title=thread.title,
            members=stringify_ids(thread.members),
            content=stringify_ids(thread.content),
            created_at=thread.created_at,
            updated_at=thread.updated_at,
        )
        for thread in threads
    ]
