"""Posting concept: posts that each belong to exactly one thread."""

import logging
from typing import Any, Dict, List, Optional, Sequence

from bson import ObjectId

from app.models.post import Post, PostOptions
from app.utils.doc_collection import DocCollection
from app.utils.errors import NotAllowedError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class PostAuthorNotMatchError(NotAllowedError):
    def __init__(self, author: ObjectId, post_id: ObjectId):
        super().__init__("{0} is not the author of post {1}!", author, post_id)


class PostNotFoundError(NotFoundError):
    def __init__(self, post_id: ObjectId):
        super().__init__("Post {0} does not exist!", post_id)


class PostingService:
    """Owns the ``posts`` collection.

    Posting never touches threads: creating or deleting a post here leaves the
    owning thread's content list alone.
    """

    def __init__(self, posts: DocCollection):
        self.posts = posts

    async def create(
        self,
        author: ObjectId,
        content: str,
        thread_id: ObjectId,
        options: Optional[PostOptions] = None,
    ) -> Dict[str, Any]:
        if content is None or not content.strip():
            raise ValidationError("Post content must be non-empty!")

        post = Post(author=author, content=content, thread=thread_id, options=options)
        _id = await self.posts.create_one(post.to_mongo())
        logger.info(f"Post {_id} created by {author} in thread {thread_id}")
        return {"msg": "Post successfully created!", "post": await self.get_post_by_id(_id)}

    async def get_posts(self) -> List[Post]:
        """Get all posts, newest first."""
        docs = await self.posts.read_many({}, sort=[("created_at", -1)])
        return [Post.from_mongo(doc) for doc in docs]

    async def get_by_author(self, author: ObjectId) -> List[Post]:
        docs = await self.posts.read_many({"author": author}, sort=[("created_at", -1)])
        return [Post.from_mongo(doc) for doc in docs]

    async def get_post_by_id(self, _id: ObjectId) -> Post:
        post = Post.from_mongo(await self.posts.read_one({"_id": _id}))
        if post is None:
            logger.warning(f"Post {_id} not found")
            raise PostNotFoundError(_id)
        return post

    async def get_many_posts_by_id(self, ids: Sequence[ObjectId]) -> List[Post]:
        """Get the posts for ``ids`` in the same order; ids without a post are skipped."""
        if not ids:
            return []
        docs = await self.posts.read_many({"_id": {"$in": list(ids)}})
        by_id = {doc["_id"]: Post.from_mongo(doc) for doc in docs}
        return [by_id[_id] for _id in ids if _id in by_id]

    async def update(
        self,
        _id: ObjectId,
        content: Optional[str] = None,
        options: Optional[PostOptions] = None,
    ) -> Dict[str, str]:
        """Update only the fields that were given."""
        update: Dict[str, Any] = {}
        if content is not None:
            if not content.strip():
                raise ValidationError("Post content must be non-empty!")
            update["content"] = content
        if options is not None:
            update["options"] = options.model_dump(exclude_none=True)

        if not update:
            await self.get_post_by_id(_id)
            return {"msg": "Post successfully updated!"}

        if not await self.posts.partial_update_one({"_id": _id}, update):
            raise PostNotFoundError(_id)
        logger.info(f"Post {_id} updated: {sorted(update)}")
        return {"msg": "Post successfully updated!"}

    async def delete(self, _id: ObjectId) -> Dict[str, str]:
        if not await self.posts.delete_one({"_id": _id}):
            raise PostNotFoundError(_id)
        logger.info(f"Post {_id} deleted")
        return {"msg": "Post deleted successfully!"}

    async def delete_by_thread(self, thread_id: ObjectId) -> int:
        """Delete every post that belongs to ``thread_id``."""
        deleted = await self.posts.delete_many({"thread": thread_id})
        if deleted:
            logger.info(f"Deleted {deleted} posts of thread {thread_id}")
        return deleted

    async def assert_author_is_user(self, _id: ObjectId, user: ObjectId) -> None:
        post = await self.get_post_by_id(_id)
        if post.author != user:
            logger.warning(f"User {user} is not the author of post {_id}")
            raise PostAuthorNotMatchError(user, _id)
