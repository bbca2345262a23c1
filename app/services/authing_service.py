"""Authing concept: user accounts and credentials."""

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from app.models.user import User
from app.utils.doc_collection import DocCollection
from app.utils.errors import NotAllowedError, NotFoundError, UnauthenticatedError, ValidationError

logger = logging.getLogger(__name__)

DELETED_USER = "DELETED_USER"


class UsernameTakenError(NotAllowedError):
    def __init__(self, username: str):
        super().__init__("User with username {0} already exists!", username)


class UserNotFoundError(NotFoundError):
    def __init__(self, user: Any):
        super().__init__("User {0} not found!", user)


def _require(value: Optional[str], field: str) -> str:
    if value is None or not value.strip():
        raise ValidationError("{0} must be non-empty!", field)
    return value


class AuthingService:
    """Owns the ``users`` collection."""

    def __init__(self, users: DocCollection):
        self.users = users

    async def create(self, username: str, password: str) -> Dict[str, Any]:
        username = _require(username, "Username").strip()
        _require(password, "Password")
        await self._assert_username_unique(username)

        try:
            _id = await self.users.create_one(
                {"username": username, "password": User.hash_password(password)}
            )
        except DuplicateKeyError:
            raise UsernameTakenError(username)
        logger.info(f"User {_id} created")
        return {"msg": "User created successfully!", "user": await self.get_user_by_id(_id)}

    async def authenticate(self, username: str, password: str) -> User:
        user = User.from_mongo(await self.users.read_one({"username": username}))
        if user is None or not user.verify_password(password or ""):
            logger.warning(f"Failed login for username {username}")
            raise UnauthenticatedError("Username or password is incorrect.")
        return user

    async def get_user_by_id(self, _id: ObjectId) -> User:
        user = User.from_mongo(await self.users.read_one({"_id": _id}))
        if user is None:
            raise UserNotFoundError(_id)
        return user

    async def get_user_by_username(self, username: str) -> User:
        user = User.from_mongo(await self.users.read_one({"username": username}))
        if user is None:
            raise UserNotFoundError(username)
        return user

    async def get_users(self) -> List[User]:
        docs = await self.users.read_many({}, sort=[("username", 1)])
        return [User.from_mongo(doc) for doc in docs]

    async def id_to_username(self, _id: ObjectId) -> str:
        """Get the username for an id, or ``DELETED_USER`` if the account is gone."""
        doc = await self.users.read_one({"_id": _id})
        return doc["username"] if doc else DELETED_USER

    async def update_username(self, _id: ObjectId, username: str) -> Dict[str, str]:
        username = _require(username, "Username").strip()
        await self._assert_username_unique(username, exclude=_id)
        if not await self.users.partial_update_one({"_id": _id}, {"username": username}):
            raise UserNotFoundError(_id)
        logger.info(f"User {_id} changed username")
        return {"msg": "Username updated successfully!"}

    async def update_password(
        self, _id: ObjectId, current_password: str, new_password: str
    ) -> Dict[str, str]:
        user = await self.get_user_by_id(_id)
        if not user.verify_password(current_password or ""):
            raise NotAllowedError("The given current password is wrong!")
        _require(new_password, "Password")
        await self.users.partial_update_one(
            {"_id": _id}, {"password": User.hash_password(new_password)}
        )
        logger.info(f"User {_id} changed password")
        return {"msg": "Password updated successfully!"}

    async def delete(self, _id: ObjectId) -> Dict[str, str]:
        await self.users.delete_one({"_id": _id})
        logger.info(f"User {_id} deleted")
        return {"msg": "User deleted!"}

    async def _assert_username_unique(self, username: str, exclude: Optional[ObjectId] = None) -> None:
        existing = await self.users.read_one({"username": username})
        if existing and existing["_id"] != exclude:
            raise UsernameTakenError(username)
