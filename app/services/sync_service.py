"""Synchronizations between concepts.

A post points at its thread and the thread lists the post in its ``content``.
The two documents live in different collections and MongoDB gives no
transaction across them, so every operation here runs its steps in a fixed
order and undoes the first step when the second one fails. Authorization is
always checked before the first write.

Between two awaited steps another request may touch the same thread. Each
list change is a single atomic ``$addToSet``/``$pull``, so concurrent writers
cannot drop each other's elements, but a reader can briefly see a post that is
not yet (or no longer) listed in its thread.
"""

import logging
from typing import Any, Dict, Optional

from bson import ObjectId

from app.models.post import PostOptions
from app.services.authing_service import AuthingService
from app.services.posting_service import PostingService, PostNotFoundError
from app.services.profiling_service import ProfilingService
from app.services.sessioning_service import Session, SessioningService
from app.services.threading_service import ThreadingService, ThreadNotFoundError
from app.utils.errors import ConceptError, ConsistencyError

logger = logging.getLogger(__name__)


async def create_post_in_thread(
    posting: PostingService,
    threading: ThreadingService,
    author: ObjectId,
    content: str,
    thread_id: ObjectId,
    options: Optional[PostOptions] = None,
    require_membership: bool = False,
) -> Dict[str, Any]:
    """Create a post and append it to its thread's content.

    If the append fails the post is deleted again. The caller then gets the
    append's own error, or ``ConsistencyError`` when the post could not be
    removed either and is left orphaned.
    """
    if require_membership:
        await threading.assert_member_is_user(thread_id, author)
    else:
        await threading.get_thread_content(thread_id)

    created = await posting.create(author, content, thread_id, options)
    post = created["post"]

    try:
        await threading.append_post(thread_id, post.id)
    except Exception as e:
        logger.error(f"Failed to append post {post.id} to thread {thread_id}: {str(e)}", exc_info=True)
        try:
            await posting.delete(post.id)
        except Exception:
            logger.error(f"Could not roll back post {post.id}; it is now orphaned", exc_info=True)
            raise ConsistencyError("Post {0} was created but could not be added to thread {1}!", post.id, thread_id) from e
        logger.info(f"Rolled back post {post.id}")
        if isinstance(e, ConceptError):
            raise
        raise ConsistencyError("Post could not be added to thread {0}!", thread_id) from e

    return created


async def delete_post_from_thread(
    posting: PostingService,
    threading: ThreadingService,
    post_id: ObjectId,
    user: ObjectId,
) -> Dict[str, str]:
    """Remove an author's post from its thread and delete it.

    If deleting the post fails after it was removed from the thread, it is put
    back at the end of the thread's content.
    """
    post = await posting.get_post_by_id(post_id)
    await posting.assert_author_is_user(post_id, user)

    await threading.remove_post(post.thread, post_id)

    try:
        return await posting.delete(post_id)
    except PostNotFoundError:
        logger.info(f"Post {post_id} was already deleted by another request")
        raise
    except Exception as e:
        logger.error(f"Failed to delete post {post_id}: {str(e)}", exc_info=True)
        try:
            await threading.append_post(post.thread, post_id)
        except ThreadNotFoundError:
            logger.info(f"Thread {post.thread} is gone; not restoring post {post_id}")
        except Exception:
            logger.error(f"Could not restore post {post_id} to thread {post.thread}", exc_info=True)
        raise ConsistencyError("Post {0} could not be deleted!", post_id) from e


async def delete_thread_cascade(
    posting: PostingService,
    threading: ThreadingService,
    thread_id: ObjectId,
    user: ObjectId,
) -> Dict[str, str]:
    """Delete a thread and every post in it, as long as ``user`` created it.

    The posts' own authors are not checked. Only posts whose ``thread`` is
    this thread are deleted; a listed post that belongs to another thread is
    left alone together with its own thread's content. Posts that point at
    the thread but were never listed in its content are swept as well.
    """
    await threading.assert_creator_is_user(thread_id, user)
    thread = await threading.get_thread_content(thread_id)

    for post in await posting.get_many_posts_by_id(thread.content):
        if post.thread != thread_id:
            logger.warning(f"Thread {thread_id} lists post {post.id} of thread {post.thread}; not deleting it")
            continue
        try:
            await posting.delete(post.id)
        except PostNotFoundError:
            logger.debug(f"Post {post.id} of thread {thread_id} was already deleted")

    orphans = await posting.delete_by_thread(thread_id)
    if orphans:
        logger.warning(f"Swept {orphans} posts of thread {thread_id} missing from its content")

    return await threading.delete_thread(thread_id)


async def delete_user_cascade(
    authing: AuthingService,
    sessioning: SessioningService,
    profiling: ProfilingService,
    session: Session,
    user: ObjectId,
) -> Dict[str, str]:
    """Delete the user's profile answers and account, then log them out.

    Posts and threads stay; they are shown as written by a deleted user.
    The session is only ended once the account is gone.
    """
    await profiling.delete_for_user(user)
    result = await authing.delete(user)
    sessioning.end(session)
    return result
