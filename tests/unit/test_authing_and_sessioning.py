"""Unit tests for the Authing and Sessioning concepts."""

import pytest
from bson import ObjectId

from app.services.authing_service import DELETED_USER, AuthingService, UsernameTakenError
from app.services.concepts import Concepts
from app.services.sessioning_service import SessioningService
from app.utils.errors import NotAllowedError, NotFoundError, UnauthenticatedError, ValidationError


@pytest.fixture
def authing(concepts: Concepts) -> AuthingService:
    return concepts.authing


class TestAuthing:
    async def test_create_and_authenticate(self, authing: AuthingService) -> None:
        created = await authing.create("alice", "s3cret")
        user = created["user"]

        assert user.username == "alice"
        assert user.password != "s3cret"
        assert (await authing.authenticate("alice", "s3cret")).id == user.id

    async def test_wrong_password(self, authing: AuthingService) -> None:
        await authing.create("alice", "s3cret")

        with pytest.raises(UnauthenticatedError):
            await authing.authenticate("alice", "wrong")
        with pytest.raises(UnauthenticatedError):
            await authing.authenticate("nobody", "s3cret")

    async def test_duplicate_username(self, authing: AuthingService) -> None:
        await authing.create("alice", "s3cret")

        with pytest.raises(UsernameTakenError):
            await authing.create("alice", "other")

    @pytest.mark.parametrize("username,password", [("", "pw"), ("bob", ""), ("  ", "pw")])
    async def test_blank_credentials(self, authing: AuthingService, username: str, password: str) -> None:
        with pytest.raises(ValidationError):
            await authing.create(username, password)

    async def test_update_username(self, authing: AuthingService) -> None:
        alice = (await authing.create("alice", "pw"))["user"]
        await authing.create("bob", "pw")

        with pytest.raises(UsernameTakenError):
            await authing.update_username(alice.id, "bob")

        await authing.update_username(alice.id, "alice2")
        assert (await authing.get_user_by_username("alice2")).id == alice.id
        with pytest.raises(NotFoundError):
            await authing.get_user_by_username("alice")

    async def test_update_password(self, authing: AuthingService) -> None:
        alice = (await authing.create("alice", "old"))["user"]

        with pytest.raises(NotAllowedError):
            await authing.update_password(alice.id, "wrong", "new")

        await authing.update_password(alice.id, "old", "new")
        await authing.authenticate("alice", "new")

    async def test_deleted_user_renders_as_placeholder(self, authing: AuthingService) -> None:
        alice = (await authing.create("alice", "pw"))["user"]
        assert await authing.id_to_username(alice.id) == "alice"

        await authing.delete(alice.id)

        assert await authing.id_to_username(alice.id) == DELETED_USER
        assert await authing.get_users() == []


class TestSessioning:
    def test_start_get_end(self) -> None:
        sessioning = SessioningService()
        session = {}
        user = ObjectId()

        sessioning.start(session, user)
        assert sessioning.get_user(session) == user

        sessioning.end(session)
        with pytest.raises(UnauthenticatedError):
            sessioning.get_user(session)

    def test_cannot_log_in_twice(self) -> None:
        sessioning = SessioningService()
        session = {}
        sessioning.start(session, ObjectId())

        with pytest.raises(NotAllowedError):
            sessioning.start(session, ObjectId())
        with pytest.raises(NotAllowedError):
            sessioning.is_logged_out(session)

    def test_end_requires_login(self) -> None:
        with pytest.raises(UnauthenticatedError):
            SessioningService().end({})
