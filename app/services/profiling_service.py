"""Profiling concept: a user's answers to the fixed profiling question."""

import logging
from typing import Dict, List, Optional

from bson import ObjectId

from app.config.profiling import ProfilingQuestion
from app.models.profile import ProfileRecord
from app.utils.doc_collection import DocCollection
from app.utils.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class InvalidChoicesError(ValidationError):
    def __init__(self, choices: List[str]):
        super().__init__("Invalid choices: {0}", ", ".join(choices))


class ProfileNotFoundError(NotFoundError):
    def __init__(self, user: ObjectId, question: str):
        super().__init__('Profile entry for user {0} and question "{1}" not found!', user, question)


class ProfilingService:
    """Owns the ``profiles`` collection, one record per (user, question)."""

    def __init__(self, profiles: DocCollection, question: ProfilingQuestion):
        self.profiles = profiles
        self.question = question

    def validate_choices(self, selected_choices: List[str]) -> None:
        invalid = self.question.invalid_choices(selected_choices)
        if invalid:
            logger.warning(f"Rejected profiling choices: {invalid}")
            raise InvalidChoicesError(invalid)

    async def ask(
        self, user: ObjectId, selected_choices: Optional[List[str]]
    ) -> Optional[Dict[str, str]]:
        """Record the user's answers to the question, replacing earlier ones.

        Nothing is stored when no choices are given.
        """
        if not selected_choices:
            return None

        self.validate_choices(selected_choices)
        created = await self.profiles.upsert_one(
            {"user": user, "question": self.question.question},
            {"selectedChoices": list(selected_choices)},
        )
        logger.info(f"Profile for user {user} {'created' if created else 'updated'}")
        return {"msg": "Profile updated successfully!"}

    async def update_profile(
        self, user: ObjectId, selected_choices: List[str]
    ) -> Optional[Dict[str, str]]:
        return await self.ask(user, selected_choices)

    async def get_user_responses(self, user: ObjectId) -> List[str]:
        doc = await self.profiles.read_one({"user": user, "question": self.question.question})
        profile = ProfileRecord.from_mongo(doc)
        if profile is None:
            raise ProfileNotFoundError(user, self.question.question)
        return profile.selectedChoices

    async def delete_for_user(self, user: ObjectId) -> int:
        deleted = await self.profiles.delete_many({"user": user})
        logger.info(f"Deleted {deleted} profile records of user {user}")
        return deleted
