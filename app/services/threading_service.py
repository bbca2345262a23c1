"""Threading concept: threads as ordered timelines of posts with members.

Threading knows nothing about Posting. Keeping a thread's ``content`` in step
with the posts that point at it is the job of ``app.services.sync_service``,
which is the only caller of :meth:`ThreadingService.append_post` and
:meth:`ThreadingService.remove_post`.
"""

import logging
from typing import Dict, List, Optional, Sequence

from bson import ObjectId

from app.models.thread import Thread
from app.utils.doc_collection import DocCollection
from app.utils.errors import NotAllowedError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class ThreadCreatorNotMatchError(NotAllowedError):
    def __init__(self, user: ObjectId, thread_id: ObjectId):
        super().__init__("{0} is not the creator of thread {1}!", user, thread_id)


class ThreadMembershipRequiredError(NotAllowedError):
    def __init__(self, user: ObjectId, thread_id: ObjectId):
        super().__init__("{0} is not a member of thread {1}!", user, thread_id)


class ThreadNotFoundError(NotFoundError):
    def __init__(self, thread_id: ObjectId):
        super().__init__("Thread {0} does not exist!", thread_id)


def _validate_title(title: Optional[str]) -> str:
    if title is None or not title.strip():
        raise ValidationError("Thread title must be non-empty!")
    return title.strip()


class ThreadingService:
    """Owns the ``threads`` collection."""

    def __init__(self, threads: DocCollection):
        self.threads = threads

    async def create_thread(
        self,
        creator: ObjectId,
        title: str,
        initial_content: Sequence[ObjectId],
        initial_members: Sequence[ObjectId],
    ) -> Thread:
        """Create a thread from copies of the given content and member lists.

        Members keep their first occurrence only; content is copied as given.
        """
        title = _validate_title(title)
        content = list(initial_content)
        members = list(dict.fromkeys(initial_members))

        thread = Thread(creator=creator, title=title, members=members, content=content)
        _id = await self.threads.create_one(thread.to_mongo())
        logger.info(f"Thread {_id} created by {creator} with {len(content)} posts and {len(members)} members")
        return await self.get_thread_content(_id)

    async def get_thread_content(self, _id: ObjectId) -> Thread:
        thread = Thread.from_mongo(await self.threads.read_one({"_id": _id}))
        if thread is None:
            logger.warning(f"Thread {_id} not found")
            raise ThreadNotFoundError(_id)
        return thread

    async def get_threads(self, member: Optional[ObjectId] = None) -> List[Thread]:
        """Get all threads, newest first, optionally only those ``member`` joined."""
        query = {"members": member} if member is not None else {}
        docs = await self.threads.read_many(query, sort=[("created_at", -1)])
        return [Thread.from_mongo(doc) for doc in docs]

    async def edit_thread_title(self, _id: ObjectId, title: str) -> Dict[str, str]:
        title = _validate_title(title)
        if not await self.threads.partial_update_one({"_id": _id}, {"title": title}):
            raise ThreadNotFoundError(_id)
        logger.info(f"Thread {_id} renamed")
        return {"msg": "Thread title successfully updated!"}

    async def delete_thread(self, _id: ObjectId) -> Dict[str, str]:
        """Delete the thread document only; its posts are left to the caller."""
        await self.threads.delete_one({"_id": _id})
        logger.info(f"Thread {_id} deleted")
        return {"msg": "Thread deleted successfully!"}

    async def join_thread(self, _id: ObjectId, user: ObjectId) -> Dict[str, str]:
        if not await self.threads.add_to_set({"_id": _id}, "members", user):
            raise ThreadNotFoundError(_id)
        logger.info(f"User {user} joined thread {_id}")
        return {"msg": "Joined thread successfully!"}

    async def leave_thread(self, _id: ObjectId, user: ObjectId) -> Dict[str, str]:
        if not await self.threads.pull({"_id": _id}, "members", user):
            raise ThreadNotFoundError(_id)
        logger.info(f"User {user} left thread {_id}")
        return {"msg": "Left thread successfully!"}

    async def append_post(self, thread_id: ObjectId, post_id: ObjectId) -> None:
        """Add ``post_id`` to the end of the thread's content if it is not there yet."""
        if not await self.threads.add_to_set({"_id": thread_id}, "content", post_id):
            raise ThreadNotFoundError(thread_id)
        logger.debug(f"Post {post_id} appended to thread {thread_id}")

    async def remove_post(self, thread_id: ObjectId, post_id: ObjectId) -> None:
        """Remove ``post_id`` from the thread's content; a missing thread is a no-op."""
        if await self.threads.pull({"_id": thread_id}, "content", post_id):
            logger.debug(f"Post {post_id} removed from thread {thread_id}")
        else:
            logger.debug(f"Thread {thread_id} already gone; nothing to remove for post {post_id}")

    async def assert_creator_is_user(self, _id: ObjectId, user: ObjectId) -> None:
        thread = await self.get_thread_content(_id)
        if thread.creator != user:
            logger.warning(f"User {user} is not the creator of thread {_id}")
            raise ThreadCreatorNotMatchError(user, _id)

    async def assert_member_is_user(self, _id: ObjectId, user: ObjectId) -> None:
        thread = await self.get_thread_content(_id)
        if user not in thread.members:
            logger.warning(f"User {user} is not a member of thread {_id}")
            raise ThreadMembershipRequiredError(user, _id)
