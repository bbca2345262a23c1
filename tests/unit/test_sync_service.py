"""Unit tests for the thread/post synchronizations."""

from unittest.mock import AsyncMock

import pytest
from bson import ObjectId

from app.services.authing_service import DELETED_USER
from app.services.concepts import Concepts
from app.services.posting_service import PostingService
from app.services.sync_service import (
    create_post_in_thread,
    delete_post_from_thread,
    delete_thread_cascade,
    delete_user_cascade,
)
from app.services.threading_service import ThreadingService
from app.utils.errors import ConsistencyError, NotAllowedError, NotFoundError


@pytest.fixture
async def thread(threading_service: ThreadingService, alice: ObjectId):
    return await threading_service.create_thread(alice, "Family reunion", [], [])


class TestCreatePost:
    async def test_family_reunion_scenario(
        self,
        posting_service: PostingService,
        threading_service: ThreadingService,
        thread,
        alice: ObjectId,
    ) -> None:
        created = await create_post_in_thread(posting_service, threading_service, alice, "hi", thread.id)
        post = created["post"]

        assert (await threading_service.get_thread_content(thread.id)).content == [post.id]

        await delete_post_from_thread(posting_service, threading_service, post.id, alice)

        assert (await threading_service.get_thread_content(thread.id)).content == []
        with pytest.raises(NotFoundError):
            await posting_service.get_post_by_id(post.id)

    async def test_posts_are_appended_in_order(
        self,
        posting_service: PostingService,
        threading_service: ThreadingService,
        thread,
        alice: ObjectId,
        bob: ObjectId,
    ) -> None:
        first = (await create_post_in_thread(posting_service, threading_service, alice, "one", thread.id))["post"]
        second = (await create_post_in_thread(posting_service, threading_service, bob, "two", thread.id))["post"]

        stored = await threading_service.get_thread_content(thread.id)
        assert stored.content == [first.id, second.id]

    async def test_missing_thread_creates_nothing(
        self, posting_service: PostingService, threading_service: ThreadingService, alice: ObjectId
    ) -> None:
        with pytest.raises(NotFoundError):
            await create_post_in_thread(posting_service, threading_service, alice, "hi", ObjectId())

        assert await posting_service.get_posts() == []

    async def test_membership_gate(
        self,
        posting_service: PostingService,
        threading_service: ThreadingService,
        thread,
        alice: ObjectId,
        bob: ObjectId,
    ) -> None:
        with pytest.raises(NotAllowedError):
            await create_post_in_thread(
                posting_service, threading_service, bob, "hi", thread.id, require_membership=True
            )
        assert await posting_service.get_posts() == []

        await threading_service.join_thread(thread.id, bob)
        created = await create_post_in_thread(
            posting_service, threading_service, bob, "hi", thread.id, require_membership=True
        )
        assert (await threading_service.get_thread_content(thread.id)).content == [created["post"].id]

    async def test_failed_append_rolls_back_post(
        self,
        posting_service: PostingService,
        threading_service: ThreadingService,
        thread,
        alice: ObjectId,
    ) -> None:
        threading_service.append_post = AsyncMock(side_effect=RuntimeError("connection reset"))

        with pytest.raises(ConsistencyError):
            await create_post_in_thread(posting_service, threading_service, alice, "hi", thread.id)

        assert await posting_service.get_posts() == []
        assert (await threading_service.get_thread_content(thread.id)).content == []

    async def test_thread_deleted_between_steps_reports_not_found(
        self,
        posting_service: PostingService,
        threading_service: ThreadingService,
        thread,
        alice: ObjectId,
    ) -> None:
        original_append = threading_service.append_post

        async def delete_then_append(thread_id, post_id):
            await threading_service.delete_thread(thread_id)
            await original_append(thread_id, post_id)

        threading_service.append_post = delete_then_append

        with pytest.raises(NotFoundError):
            await create_post_in_thread(posting_service, threading_service, alice, "hi", thread.id)

        assert await posting_service.get_posts() == []

    async def test_failed_rollback_leaves_orphan_and_reports_it(
        self,
        posting_service: PostingService,
        threading_service: ThreadingService,
        thread,
        alice: ObjectId,
    ) -> None:
        threading_service.append_post = AsyncMock(side_effect=RuntimeError("connection reset"))
        posting_service.delete = AsyncMock(side_effect=RuntimeError("connection reset"))

        with pytest.raises(ConsistencyError):
            await create_post_in_thread(posting_service, threading_service, alice, "hi", thread.id)

        posting_service.delete.assert_awaited_once()
        assert len(await posting_service.get_posts()) == 1


class TestDeletePost:
    async def test_non_author_changes_nothing(
        self,
        posting_service: PostingService,
        threading_service: ThreadingService,
        thread,
        alice: ObjectId,
        bob: ObjectId,
    ) -> None:
        post = (await create_post_in_thread(posting_service, threading_service, alice, "hi", thread.id))["post"]

        with pytest.raises(NotAllowedError):
            await delete_post_from_thread(posting_service, threading_service, post.id, bob)

        assert (await threading_service.get_thread_content(thread.id)).content == [post.id]
        assert (await posting_service.get_post_by_id(post.id)).content == "hi"

    async def test_missing_post(
        self, posting_service: PostingService, threading_service: ThreadingService, alice: ObjectId
    ) -> None:
        with pytest.raises(NotFoundError):
            await delete_post_from_thread(posting_service, threading_service, ObjectId(), alice)

    async def test_failed_delete_restores_thread_content(
        self,
        posting_service: PostingService,
        threading_service: ThreadingService,
        thread,
        alice: ObjectId,
    ) -> None:
        post = (await create_post_in_thread(posting_service, threading_service, alice, "hi", thread.id))["post"]
        posting_service.delete = AsyncMock(side_effect=RuntimeError("connection reset"))

        with pytest.raises(ConsistencyError):
            await delete_post_from_thread(posting_service, threading_service, post.id, alice)

        assert (await threading_service.get_thread_content(thread.id)).content == [post.id]
        assert (await posting_service.get_post_by_id(post.id)).content == "hi"


class TestDeleteThread:
    async def test_cascades_to_all_posts(
        self,
        posting_service: PostingService,
        threading_service: ThreadingService,
        thread,
        alice: ObjectId,
        bob: ObjectId,
    ) -> None:
        first = (await create_post_in_thread(posting_service, threading_service, alice, "one", thread.id))["post"]
        second = (await create_post_in_thread(posting_service, threading_service, bob, "two", thread.id))["post"]

        await delete_thread_cascade(posting_service, threading_service, thread.id, alice)

        for post in (first, second):
            with pytest.raises(NotFoundError):
                await posting_service.delete(post.id)
        with pytest.raises(NotFoundError):
            await threading_service.get_thread_content(thread.id)

    async def test_sweeps_posts_missing_from_content(
        self,
        posting_service: PostingService,
        threading_service: ThreadingService,
        thread,
        alice: ObjectId,
    ) -> None:
        orphan = (await posting_service.create(alice, "orphan", thread.id))["post"]

        await delete_thread_cascade(posting_service, threading_service, thread.id, alice)

        with pytest.raises(NotFoundError):
            await posting_service.get_post_by_id(orphan.id)

    async def test_skips_posts_already_gone(
        self,
        posting_service: PostingService,
        threading_service: ThreadingService,
        alice: ObjectId,
    ) -> None:
        thread = await threading_service.create_thread(alice, "Reunion", [ObjectId()], [])

        result = await delete_thread_cascade(posting_service, threading_service, thread.id, alice)

        assert result == {"msg": "Thread deleted successfully!"}

    async def test_only_creator_may_delete(
        self,
        posting_service: PostingService,
        threading_service: ThreadingService,
        thread,
        alice: ObjectId,
        bob: ObjectId,
    ) -> None:
        post = (await create_post_in_thread(posting_service, threading_service, bob, "hi", thread.id))["post"]

        with pytest.raises(NotAllowedError):
            await delete_thread_cascade(posting_service, threading_service, thread.id, bob)

        assert (await threading_service.get_thread_content(thread.id)).content == [post.id]
        assert (await posting_service.get_post_by_id(post.id)).author == bob

    async def test_missing_thread(
        self, posting_service: PostingService, threading_service: ThreadingService, alice: ObjectId
    ) -> None:
        with pytest.raises(NotFoundError):
            await delete_thread_cascade(posting_service, threading_service, ObjectId(), alice)

    async def test_leaves_posts_of_other_threads_alone(
        self,
        posting_service: PostingService,
        threading_service: ThreadingService,
        thread,
        alice: ObjectId,
        bob: ObjectId,
    ) -> None:
        alices_post = (await create_post_in_thread(posting_service, threading_service, alice, "mine", thread.id))["post"]
        bobs_thread = await threading_service.create_thread(bob, "Borrowed", [alices_post.id], [])
        bobs_post = (await create_post_in_thread(posting_service, threading_service, bob, "own", bobs_thread.id))["post"]

        await delete_thread_cascade(posting_service, threading_service, bobs_thread.id, bob)

        assert (await posting_service.get_post_by_id(alices_post.id)).content == "mine"
        assert (await threading_service.get_thread_content(thread.id)).content == [alices_post.id]
        with pytest.raises(NotFoundError):
            await posting_service.get_post_by_id(bobs_post.id)
        with pytest.raises(NotFoundError):
            await threading_service.get_thread_content(bobs_thread.id)


class TestDeleteUser:
    async def test_ends_session_after_account_is_gone(self, concepts: Concepts) -> None:
        user = (await concepts.authing.create("alice", "pw"))["user"]
        await concepts.profiling.ask(user.id, ["Learn family history"])
        session = {}
        concepts.sessioning.start(session, user.id)

        await delete_user_cascade(
            concepts.authing, concepts.sessioning, concepts.profiling, session, user.id
        )

        assert session == {}
        assert await concepts.authing.id_to_username(user.id) == DELETED_USER

    async def test_failed_delete_keeps_user_logged_in(self, concepts: Concepts) -> None:
        user = (await concepts.authing.create("alice", "pw"))["user"]
        session = {}
        concepts.sessioning.start(session, user.id)
        concepts.authing.delete = AsyncMock(side_effect=RuntimeError("connection reset"))

        with pytest.raises(RuntimeError):
            await delete_user_cascade(
                concepts.authing, concepts.sessioning, concepts.profiling, session, user.id
            )

        assert concepts.sessioning.get_user(session) == user.id
        assert (await concepts.authing.get_user_by_id(user.id)).username == "alice"
